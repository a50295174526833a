#!/usr/bin/env python3
# consolebar/__main__.py
"""
Entry script. Run: python -m consolebar
"""
from consolebar.demo import main

if __name__ == "__main__":
    main()
