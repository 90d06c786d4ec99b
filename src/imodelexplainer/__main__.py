"""
Run with: python -m imodelexplainer
"""
import sys

from imodelexplainer.app.main import main

if __name__ == "__main__":
    sys.exit(main())
