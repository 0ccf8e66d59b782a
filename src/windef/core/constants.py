# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Plugin identity and scanner output markers."""

import re

PLUGIN_NAME = "windows-defender"
PLUGIN_CATEGORY = "av"

SCAN_ID_HEADER = "X-Malice-ID"

# EngineScanCallback(): Threat Virus:DOS/EICAR_Test_File identified.
THREAT_PATTERN = re.compile(r"Threat\s+(?P<name>\S.*?)\s+identified\.?\s*$", re.MULTILINE)

UPDATED_LAYOUT = "%Y%m%d%H%M"
UPDATED_DATE_LAYOUT = "%Y%m%d"
