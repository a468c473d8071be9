import io

import pytest

from ordtree import log
from ordtree import BSTree


@pytest.fixture
def logbuf(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr(log, 'logger', log.Logger(log.LOG_DEBUG3, buf, 'never'))
    return buf

@pytest.fixture
def restore_logger(monkeypatch):
    monkeypatch.setattr(log, 'logger', log.logger)


def test_level_filtering():
    buf = io.StringIO()
    logger = log.Logger(log.LOG_INFO, buf, 'never')
    logger.do_log(log.LOG_INFO, "shown ", 1)
    logger.do_log(log.LOG_DEBUG1, "hidden")
    logger.do_log(log.LOG_ERROR, "error: ", "bad")
    assert buf.getvalue() == "shown 1\nerror: bad\n"

def test_colors():
    buf = io.StringIO()
    logger = log.Logger(log.LOG_WARN, buf, 'always')
    logger.do_log(log.LOG_WARN, "careful")
    assert buf.getvalue() == log.Colors.BRIGHT_YELLOW + "careful" + \
            log.Colors.RESET + "\n"

def test_auto_colors_off_for_non_tty():
    logger = log.Logger(log.LOG_WARN, io.StringIO(), 'auto')
    assert isinstance(logger.colors.colors, log.NoColors)
    assert not isinstance(logger.colors.colors, log.Colors)

def test_invalid_color_preference():
    with pytest.raises(ValueError):
        log.Logger(colors='sometimes')

@pytest.mark.parametrize('s, level', [
    ('info', log.LOG_INFO),
    ('DEBUG2', log.LOG_DEBUG2),
    ('warning', log.LOG_WARN),
    (' 4 ', log.LOG_DEBUG3),
    ('-1', log.LOG_ERROR),
])
def test_parse_loglevel(s, level):
    assert log.parse_loglevel(s) == level

@pytest.mark.parametrize('s', ['loud', '7', '-3'])
def test_parse_loglevel_invalid(s):
    with pytest.raises(ValueError):
        log.parse_loglevel(s)

def test_configure_keeps_unset_options(restore_logger):
    buf = io.StringIO()
    log.configure(loglevel=log.LOG_DEBUG1, logfile=buf)
    log.configure(colors='never')
    assert log.logger.loglevel == log.LOG_DEBUG1
    log.debug1("hello")
    assert buf.getvalue() == "hello\n"

def test_configure_from_env(restore_logger):
    buf = io.StringIO()
    log.configure(logfile=buf)
    log.configure_from_env({log.ENV_LOGLEVEL: 'debug3',
                            log.ENV_COLORS: 'never'})
    assert log.logger.loglevel == log.LOG_DEBUG3
    assert log.logger.color_preference == 'never'

def test_configure_from_env_invalid(restore_logger):
    with pytest.raises(ValueError):
        log.configure_from_env({log.ENV_LOGLEVEL: 'verbose'})

def test_tree_logs_mutations(logbuf):
    tree = BSTree([(5, 'a'), (8, 'b')])
    tree.insert(5, 'c')
    tree.remove(5)
    out = logbuf.getvalue()
    assert "inserted key 5\n" in out
    assert "key 5 already in tree, replacing value\n" in out
    assert "root takes over content of key 8\n" in out
    assert "removed key 5\n" in out

def test_tree_is_quiet_by_default(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr(log, 'logger', log.Logger(logfile=buf, colors='never'))
    BSTree([(1, 1), (2, 2)]).remove(1)
    assert buf.getvalue() == ""
