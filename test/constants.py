# Test Utility Constants

from datetime import datetime, timedelta, timezone


# Test Clients
TEST_CLIENT_NAME = 'Ada Lovelace'
TEST_CLIENT_EMAIL = 'ada@example.com'
ANOTHER_CLIENT_NAME = 'Grace Hopper'
ANOTHER_CLIENT_EMAIL = 'grace@example.com'

# Time anchors (UTC, aligned to the hour)
DAY_START = datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
ONE_HOUR = timedelta(hours=1)

# Concurrent create attempts for the same slot
CONCURRENT_ATTEMPTS = 10
