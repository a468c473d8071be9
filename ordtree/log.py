import os
import sys

LOG_FATAL = -2
LOG_ERROR = -1
LOG_WARN = 0
LOG_INFO = 1
LOG_DEBUG1 = 2
LOG_DEBUG2 = 3
LOG_DEBUG3 = 4

LEVEL_NAMES = {
        'fatal'  : LOG_FATAL,
        'error'  : LOG_ERROR,
        'warn'   : LOG_WARN,
        'warning': LOG_WARN,
        'info'   : LOG_INFO,
        'debug'  : LOG_DEBUG1,
        'debug1' : LOG_DEBUG1,
        'debug2' : LOG_DEBUG2,
        'debug3' : LOG_DEBUG3,
    }

ENV_LOGLEVEL = 'ORDTREE_LOGLEVEL'
ENV_COLORS = 'ORDTREE_COLORS'

def warn(*msg):
    logger.do_log(LOG_WARN, "warning: ", *msg)

def error(*msg):
    logger.do_log(LOG_ERROR, "error: ", *msg)

def info(*msg):
    logger.do_log(LOG_INFO, *msg)

def debug1(*msg):
    logger.do_log(LOG_DEBUG1, *msg)

def debug2(*msg):
    logger.do_log(LOG_DEBUG2, *msg)

def debug3(*msg):
    logger.do_log(LOG_DEBUG3, *msg)


def parse_loglevel(s):
    """Converts a level name ('info', 'debug2', ...) or an integer string
    into one of the LOG_* constants. Raises ValueError on anything else."""
    s = s.strip().lower()
    if s in LEVEL_NAMES:
        return LEVEL_NAMES[s]
    level = int(s)
    if level < LOG_FATAL or level > LOG_DEBUG3:
        raise ValueError("log level out of range: " + s)
    return level

def configure(loglevel=None, logfile=None, colors=None):
    """Replaces the module logger, keeping any setting that is not given."""
    global logger
    if loglevel is None:
        loglevel = logger.loglevel
    if logfile is None:
        logfile = logger.logfile
    if colors is None:
        colors = logger.color_preference
    logger = Logger(loglevel, logfile, colors)
    return logger

def configure_from_env(environ=None):
    """Configures the module logger from ORDTREE_LOGLEVEL and ORDTREE_COLORS."""
    if environ is None:
        environ = os.environ
    loglevel = None
    if environ.get(ENV_LOGLEVEL):
        loglevel = parse_loglevel(environ[ENV_LOGLEVEL])
    colors = environ.get(ENV_COLORS) or None
    return configure(loglevel=loglevel, colors=colors)


class Logger(object):
    def __init__(self, loglevel=LOG_WARN, logfile=None, colors='auto'):
        self.loglevel = loglevel
        self.logfile = logfile
        self.set_colors(colors)

    @property
    def _file(self):
        # resolved lazily so that a replaced sys.stderr is honoured
        return self.logfile if self.logfile is not None else sys.stderr

    def set_colors(self, preference):
        if preference == 'always':
            colors = Colors()
        elif preference == 'auto':
            isatty = getattr(self._file, 'isatty', None)
            if isatty is not None and isatty():
                colors = Colors()
            else:
                colors = NoColors()
        elif preference == 'never':
            colors = NoColors()
        else:
            raise ValueError("invalid color preference: " + str(preference))
        self.color_preference = preference
        self.colors = ColorSchemeDefault(colors)
        self._make_colormap()

    def _make_colormap(self):
        self._colormap = {
                LOG_WARN  : self.colors.WARN,
                LOG_ERROR : self.colors.ERROR,
                LOG_FATAL : self.colors.ERROR,
                LOG_DEBUG1: self.colors.DEBUG1,
                LOG_DEBUG2: self.colors.DEBUG2,
                LOG_DEBUG3: self.colors.DEBUG3
            }

    def _write_log(self, msg):
        self._file.write(msg)

    def _colorize_msg(self, level, *msg):
        try:
            return self.colors.wrap_list(self._colormap[level], list(msg))
        except KeyError:
            return msg

    def _compile_msg(self, *msg):
        l = list(map(str, msg))
        l.append("\n")
        return ''.join(l)

    def enabled_for(self, level):
        return level <= self.loglevel or level <= LOG_FATAL

    def do_log(self, level, *msg):
        if not self.enabled_for(level):
            return
        msg = self._colorize_msg(level, *msg)
        msg = self._compile_msg(*msg)
        self._write_log(msg)


class NoColors:
    RESET          = ''
    RED            = ''
    YELLOW         = ''
    CYAN           = ''
    BRIGHT_RED     = ''
    BRIGHT_YELLOW  = ''

    def wrap(self, color, s):
        return s

    def wrap_list(self, color, l):
        return l

class Colors(NoColors):
    RESET          = '\033[0m'
    RED            = '\033[31m'
    YELLOW         = '\033[33m'
    CYAN           = '\033[36m'
    BRIGHT_RED     = '\033[1;31m'
    BRIGHT_YELLOW  = '\033[1;33m'

    def wrap(self, color, s):
        return ''.join((color, s, self.RESET))

    def wrap_list(self, color, l):
        l.insert(0, color)
        l.append(self.RESET)
        return l

class ColorSchemeDefault:
    def __init__(self, colors):
        if colors is None:
            colors = Colors()
        self.WARN = colors.BRIGHT_YELLOW
        self.ERROR = colors.BRIGHT_RED
        self.DEBUG1 = colors.CYAN
        self.DEBUG2 = colors.CYAN
        self.DEBUG3 = colors.CYAN

        self.RESET = colors.RESET
        self.colors = colors

    def wrap(self, color, s):
        return self.colors.wrap(color, s)

    def wrap_list(self, color, l):
        return self.colors.wrap_list(color, l)


logger = Logger(colors='never')
