import hashlib
from os import PathLike
from typing import Union

CHUNK_SIZE = 64 * 1024


def md5_file(path: Union[str, PathLike], chunk_size: int = CHUNK_SIZE) -> str:
    """Hex MD5 over the whole file; this is what the updater checks against x-MD5."""

    digest = hashlib.md5()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest()
