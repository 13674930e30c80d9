# --- utils.py ---

import time
import string
from colorama import Fore, Style, init

init()

# Default substitution alphabet (single-byte letters only)
ALPHABET = string.ascii_lowercase

VERBOSE = False
start_time = None

_import_time = time.time()


def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    t0 = start_time if start_time is not None else _import_time
    elapsed = time.time() - t0
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)


def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)


def normalize_alphabet(alphabet):
    """Return ``alphabet`` as a string of unique single-byte characters.

    Raises ``ValueError`` when the alphabet is empty or contains characters
    that do not fit in one byte.
    """
    seen = []
    for ch in alphabet:
        if ord(ch) > 0x7F:
            raise ValueError(f"alphabet character {ch!r} is not a single-byte character")
        if ch.isspace():
            raise ValueError("alphabet must not contain whitespace")
        if ch not in seen:
            seen.append(ch)
    if not seen:
        raise ValueError("alphabet must not be empty")
    return "".join(seen)
