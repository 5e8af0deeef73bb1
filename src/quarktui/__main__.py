#!/usr/bin/env python3
"""
Entry point for running the quarktui demo with 'python -m quarktui'
"""
from quarktui.main import main

if __name__ == "__main__":
    main()
