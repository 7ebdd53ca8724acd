#!/usr/bin/env python3
"""
Main entry point for the Media Stream Service.

This script starts the HTTP server that streams stored videos with
byte-range support.
"""

from media_stream_service.main import main

if __name__ == "__main__":
    main()
