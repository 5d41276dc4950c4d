#!/usr/bin/env python3
"""
Legacy runner - forwards to the nupy CLI
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from nupy.cli.main import cli

if __name__ == "__main__":
    # If no arguments, read a program from the keyboard
    if len(sys.argv) == 1:
        sys.argv.append('check')

    # Support legacy: main.py prog.py → nupy check prog.py
    if len(sys.argv) == 2 and sys.argv[1].endswith('.py'):
        sys.argv.insert(1, 'check')

    cli()
