import os
import tempfile
import time

from utils import vlog


def extract_words(words_path, output_path, length):
    """Copy the lines of ``words_path`` that are exactly ``length`` bytes long
    (line terminator excluded) into ``output_path``, one per line.

    The output is staged in a temporary file and moved into place, so
    ``output_path`` may be the input file itself. Returns the number of lines
    written.
    """
    t0 = time.time()
    count = 0
    out_dir = os.path.dirname(os.path.abspath(output_path))
    fd, tmp_path = tempfile.mkstemp(dir=out_dir, prefix=".extract-", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as dst, open(words_path, "rb") as src:
            for line in src:
                word = line.rstrip(b"\r\n")
                if len(word) == length:
                    dst.write(word + b"\n")
                    count += 1
        os.replace(tmp_path, output_path)
    except BaseException:
        os.unlink(tmp_path)
        raise
    vlog(f"Extracted {count} words of length {length} into {output_path}", t0)
    return count
