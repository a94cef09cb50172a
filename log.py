import sys
from common import config

LEVELS = {
    'debug' : 10,
    'info'  : 20,
    'error' : 40,
}

def _level():
    name = config.get('log', 'level', fallback='info')
    return LEVELS.get(name.strip().lower(), LEVELS['info'])

def _output(level, fmt, args):
    if LEVELS[level] < _level():
        return
    msg = fmt % args if args else fmt
    #caller of debug/info/error
    frame = sys._getframe(2)
    print(frame.f_code.co_filename, frame.f_lineno, level.upper(), msg)

def debug(fmt, *args):
    _output('debug', fmt, args)

def info(fmt, *args):
    _output('info', fmt, args)

def error(fmt, *args):
    _output('error', fmt, args)
