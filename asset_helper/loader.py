from pathlib import Path


def read_file(path):
    """
    The default loader. Relative paths are read from the directory the process was started in.
    """
    return Path(path).read_bytes()


def file_loader(root=None):
    """
    Returns a loader that reads paths relative to `root`. Absolute paths are read as is.
    """
    if root is None:
        return read_file

    root = Path(root)

    def load(path):
        return (root / path).read_bytes()

    return load
