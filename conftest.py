import os
import sys

# Put the project root on sys.path so tests can import the flat
# 'models', 'services' and 'helpers' packages without an install.
project_root_path = os.path.abspath(os.path.dirname(__file__))
if project_root_path not in sys.path:
    sys.path.insert(0, project_root_path)
