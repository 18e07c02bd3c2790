#!/usr/bin/env python3
from localeblog.cli import main

if __name__ == "__main__":
    main()
