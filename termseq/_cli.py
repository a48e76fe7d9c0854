import sys

from ._main import main
from .extensions import detect_terminal_extension
from .io import get_size
from .utils import listen_to_logs


def cli(argv=None):
    argv = sys.argv if argv is None else argv
    if "--version" in argv or "version" in argv[1:2]:
        from . import __version__

        print("termseq", __version__)
    elif "--listen" in argv:
        listen_to_logs()
    elif "--detect" in argv:
        print(detect_terminal_extension() or "none")
    elif "--size" in argv:
        width, height = get_size()
        print(f"{width}x{height}")
    else:
        main()
