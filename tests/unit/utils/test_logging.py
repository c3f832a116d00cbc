import logging

import csscraft.utils.files
from csscraft.utils.logging import setup_local_logging


def test_setup_local_logging_writes_file(monkeypatch, tmp_path, restore_root_logger):
    monkeypatch.setattr(csscraft.utils.files, 'get_project_root', lambda: tmp_path)

    log_file = setup_local_logging('INFO')
    logging.getLogger('csscraft.test').info('hello from the test')
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert log_file.parent == tmp_path / '.csscraft' / 'logs'
    assert 'hello from the test' in log_file.read_text()
    assert restore_root_logger.level == logging.INFO


def test_setup_local_logging_all_level(monkeypatch, tmp_path, restore_root_logger):
    monkeypatch.setattr(csscraft.utils.files, 'get_project_root', lambda: tmp_path)

    setup_local_logging('ALL')
    assert restore_root_logger.level == logging.NOTSET
