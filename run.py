"""
Development launcher for the I-Model Explainer.

Starts the drag-to-explore window straight from a source checkout, without
installing the package: 'src/' is put on sys.path before importing
imodelexplainer.

Environment:
    IMODEL_DEBUG=1          log every pointer event at DEBUG level
    IMODEL_LOG_FILE=<path>  also write the log to a file

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'imodel.explainer'  # Arbitrary string
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from imodelexplainer.app.main import main

if __name__ == "__main__":
    sys.exit(main())
