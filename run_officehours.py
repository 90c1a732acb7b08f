#!/usr/bin/env python3
"""
Convenience entry point for running officehours from a source checkout.

Usage: python run_officehours.py [command] [options]
"""

from officehours.cli.app import app

if __name__ == "__main__":
    app()
