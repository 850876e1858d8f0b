#! /usr/bin/env python3
# -*- coding: utf-8 -*-

"""
This is a demonstration of the observer design pattern.

A subject changes its state three times. Two observers are attached to it
and react depending on the new state. The second observer is detached
before the third state change.
"""

from observerdemo.entrypoints.demo import main

if __name__ == '__main__':
    main()
