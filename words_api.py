import os
import sys

# Make sure we can import wordbook from ./python
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PYTHON_DIR = os.path.join(BASE_DIR, "python")
if PYTHON_DIR not in sys.path:
    sys.path.insert(0, PYTHON_DIR)

from wordbook.api.app import create_app

# uvicorn words_api:app --host 127.0.0.1 --port 8787
app = create_app()
