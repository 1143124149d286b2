"""
Configuration package for PagerKit.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# === CONFIG ===
SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-change-this-in-production")

# Paging defaults: PAGING_PAGE_SIZE, PAGING_RESULTS_TEXT_SINGULAR, PAGING_RESULTS_TEXT_PLURAL
from .paging import PagingSettings, load_paging_settings

__all__ = [
    'SECRET_KEY',
    'PagingSettings',
    'load_paging_settings',
]
