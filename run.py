"""
Development Runner
==================
Starts the calculator straight from a source checkout, without
``pip install -e .``.

It prepends ``src/`` to ``sys.path`` so ``desktopcalc`` imports resolve, gives
the process its own taskbar identity on Windows (so the calculator icon is
shown instead of the Python one), then hands over to ``desktopcalc.main``.
Logging is controlled through DESKTOPCALC_LOG_LEVEL / DESKTOPCALC_LOG_FILE.

Usage:
    $ python run.py
    $ DESKTOPCALC_LOG_LEVEL=DEBUG python run.py
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'desktopcalc.Calculator'  # Arbitrary string
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from desktopcalc.main import main

if __name__ == "__main__":
    main()
