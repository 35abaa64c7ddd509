"""
ANSI colour helpers for console output. The report file is always plain text.

Every helper takes ``enabled``; with ``enabled=False`` the text comes back
unchanged.
"""

# Monokai 256-colour palette
class C:
    RESET  = "\033[0m"
    BOLD   = "\033[1m"
    OK_GRN = "\033[38;5;148m"   # #A6E22E green  : success
    NG_RED = "\033[38;5;197m"   # #F92672 red    : errors
    TITLE  = "\033[38;5;81m"    # #66D9EF cyan   : section titles
    ORANGE = "\033[38;5;208m"   # #FD971F orange : progress steps
    REPO   = "\033[38;5;228m"   # #E6DB74 yellow : owner/repo
    DIM    = "\033[38;5;242m"   # #75715E grey   : timestamps


def _wrap(codes: str, text: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{codes}{text}{C.RESET}"


def ok(text: str, enabled: bool = True) -> str:   return _wrap(C.OK_GRN, text, enabled)
def ng(text: str, enabled: bool = True) -> str:   return _wrap(C.NG_RED, text, enabled)
def head(text: str, enabled: bool = True) -> str: return _wrap(C.TITLE + C.BOLD, text, enabled)
def dim(text: str, enabled: bool = True) -> str:  return _wrap(C.DIM, text, enabled)
def repo(text: str, enabled: bool = True) -> str: return _wrap(C.REPO, text, enabled)
def step(text: str, enabled: bool = True) -> str: return _wrap(C.ORANGE, text, enabled)
