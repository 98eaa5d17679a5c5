#!/usr/bin/env python
"""
Entry point for running the commit parser HTTP service.

This script properly sets up the Python path and runs the server.
"""

import sys
from pathlib import Path

# Add src directory to Python path
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

# Check for required dependencies
try:
    from dotenv import load_dotenv
    import uvicorn
except ImportError as e:
    print(f"""
Error: Missing required dependencies

{e}

Please make sure you have activated your virtual environment and installed the package:

    pip install -e .

Then try running again:
    python run.py
""")
    sys.exit(1)

# Load environment variables
load_dotenv()

# Configure logging before importing application modules
from conventional_commit_parser.logging_config import configure_logging
from conventional_commit_parser.config import get_settings

settings = get_settings()
configure_logging(level=settings.log_level, format_style=settings.log_format)

from conventional_commit_parser.main import app


def main():
    """Run the parser service."""
    limit = settings.max_message_length or "unlimited"
    print(f"""
Conventional Commit Parser

Configuration:
   - Max message length: {limit}
   - Detailed errors: {settings.include_error_details}
""")

    print(f"Server starting on http://{settings.host}:{settings.port}")
    print(f"API docs available at http://{settings.host}:{settings.port}/docs")
    print(f"Health check: http://{settings.host}:{settings.port}/health\n")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
