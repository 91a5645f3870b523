"""
Version information for Cards Tour
"""

VERSION = "1.0.0"
BUILD_DATE = "2026-10-18"


def get_version_info():
    """Get formatted version information"""
    return {
        'version': VERSION,
        'build_date': BUILD_DATE,
    }
