"""Configuration module for the NimRev scoring engine."""
import os
from typing import Dict, Any

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def load_config() -> Dict[str, Any]:
    """Load all configuration variables."""
    return {
        # Logging Configuration
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO').upper(),
        'LOG_FORMAT': os.getenv('LOG_FORMAT', 'json'),
        'LOG_FILE': os.getenv('LOG_FILE', ''),

        # Scan Engine Settings
        'SCAN_CACHE_TTL_MS': int(os.getenv('SCAN_CACHE_TTL_MS', '30000')),
        'SCAN_TIMEOUT_MS': int(os.getenv('SCAN_TIMEOUT_MS', '15000')),
        'SCAN_DEFAULT_TONE': os.getenv('SCAN_DEFAULT_TONE', 'clinical').lower(),
        'SCAN_MAX_BATCH_SIZE': int(os.getenv('SCAN_MAX_BATCH_SIZE', '10')),

        # Threat Model Thresholds
        'THREAT_LIQUIDITY_LOW': float(os.getenv('THREAT_LIQUIDITY_LOW', '0.01')),
        'THREAT_WHALE_TOP10_HIGH': float(os.getenv('THREAT_WHALE_TOP10_HIGH', '80')),  # percent
        'THREAT_NEW_CONTRACT_SEC': int(os.getenv('THREAT_NEW_CONTRACT_SEC', '86400')),
        'THREAT_BOT_ACTIVITY_HIGH': float(os.getenv('THREAT_BOT_ACTIVITY_HIGH', '0.7')),

        # Pattern Model Settings
        'PATTERN_CONFIDENCE_THRESHOLD': float(os.getenv('PATTERN_CONFIDENCE_THRESHOLD', '0.85')),

        # Feature Service Settings
        'FEATURE_SERVICE_URL': os.getenv('FEATURE_SERVICE_URL', ''),
        'FEATURE_SERVICE_API_KEY': os.getenv('FEATURE_SERVICE_API_KEY', ''),
        'FEATURE_SERVICE_MAX_RETRIES': int(os.getenv('FEATURE_SERVICE_MAX_RETRIES', '3')),
        'FEATURE_SERVICE_TIMEOUT': float(os.getenv('FEATURE_SERVICE_TIMEOUT', '10')),  # seconds
    }
