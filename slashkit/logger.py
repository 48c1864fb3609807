# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""logger.py"""
import logging

logger = logging.getLogger("slashkit")
