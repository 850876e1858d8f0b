#! /usr/bin/env python3
# -*- coding: utf-8 -*-

"""
This is an interactive text-based demonstration of the observer design
pattern.
"""

from observerdemo.entrypoints.tui import main

if __name__ == '__main__':
    main()
