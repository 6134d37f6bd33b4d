import sys
from pathlib import Path

# Allow the import of support modules for tests
sys.path.append(str(Path(__file__).resolve().parent))
