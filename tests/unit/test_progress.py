from __future__ import annotations

from unittest.mock import MagicMock, patch

from dataprep.services.progress import StageProgress


def test_disabled_without_tty():
    with patch("dataprep.services.progress.is_tty_enabled", return_value=False):
        with StageProgress(3) as progress:
            progress.start_stage("clean")
            progress.finish_stage(10)
            assert progress.pbar is None
            assert progress.current_stage == 1


def test_enabled_with_tty_updates_bar():
    fake_bar = MagicMock()
    with patch("dataprep.services.progress.is_tty_enabled", return_value=True):
        with patch("dataprep.services.progress.tqdm", return_value=fake_bar) as factory:
            progress = StageProgress(2, description="Cleaning x.csv")
            progress.start_stage("infer")
            progress.finish_stage(5)
            progress.close()
    factory.assert_called_once()
    fake_bar.set_description.assert_called_with("Cleaning x.csv (infer)")
    fake_bar.set_postfix.assert_called_with(rows=5)
    fake_bar.update.assert_called_once_with(1)
    fake_bar.close.assert_called_once()
    assert progress.pbar is None
