import os
import sys

# Make the top-level packages (config, structs, conv_lib) and main.py importable without installing.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if project_root not in sys.path:
    sys.path.insert(0, project_root)
