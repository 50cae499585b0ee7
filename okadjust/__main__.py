#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/__main__.py

from okadjust.main import main

if __name__ == "__main__":
    main()
