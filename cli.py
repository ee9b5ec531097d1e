#!/usr/bin/env python3
"""Unified CLI for the personal assistant.

Usage:
    python cli.py tracker --help
"""
import sys
import argparse


def main():
    parser = argparse.ArgumentParser(
        description='⏱️  Personal Assistant',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modules:
  tracker       Weekly time tracking log

Examples:
  python cli.py tracker init
  python cli.py tracker start
  python cli.py tracker stop --time 17:30
  python cli.py tracker report
  python cli.py tracker check --date 2020-07-14
"""
    )
    
    parser.add_argument(
        'module',
        choices=['tracker'],
        help='Module to run'
    )
    
    # Parse just the module, pass rest to submodule
    args, remaining = parser.parse_known_args()
    
    # Dispatch to module CLI
    if args.module == 'tracker':
        from modules.tracker.cli import main as tracker_main
        tracker_main(remaining)


if __name__ == '__main__':
    main()
