#!/usr/bin/env python3
"""
{{NAME}} {{VERSION}}

{{DESC}}
"""

import argparse
import sys

APP = "{{SHORT_NAME}}"
VER = "{{VERSION}}"
DESC = "{{DESC}}"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog=APP, description=DESC)
    parser.add_argument("-v", "--version", action="version", version=f"{APP} {VER}")
    parser.parse_args(argv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
