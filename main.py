import sys
import os

# Ensure src is in python path
sys.path.append(os.path.join(os.path.dirname(__file__), "src"))

from tea_timer.cli import app

if __name__ == "__main__":
    app()
