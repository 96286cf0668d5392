import logging

logger = logging.getLogger("libtotp")
