"""VTX Verify - fail-closed checks for .vtxprog files."""
from .logic import verify_file

__all__ = ["verify_file"]
