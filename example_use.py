#!/usr/bin/env python3

# Runs the Bitwise command-line tool, e.g.:
#   ./example_use.py --loglevel debug clear 0xFF 2 5

from cli import bits_cli as cli

if __name__ == "__main__":
    cli.main()
