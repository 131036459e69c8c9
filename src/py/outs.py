## outs.py
## last updated: 19/10/2026 <d/m/y>
## m-c-r-p
import sys
from colorama import Fore, Style

def _emit(color, tag, message, stream=None):
    stream = stream or sys.stdout
    line = f"{tag} {message}" if tag else message
    print(f"{color}{line}{Style.RESET_ALL}", file=stream, flush=True)

def info(message):
    _emit(Fore.CYAN, "[INFO]", message)

def ok(message):
    _emit(Fore.GREEN, "[OK]", message)

def warn(message):
    _emit(Fore.YELLOW, "[WARN]", message)

def error(message):
    _emit(Fore.RED, "[ERROR]", message, stream=sys.stderr)

def fatal(message):
    _emit(Fore.RED, "[FATAL]", message, stream=sys.stderr)

def cancel(message):
    _emit(Fore.YELLOW, "[CANCEL]", message)

def plain(message):
    _emit("", "", message)

## end
