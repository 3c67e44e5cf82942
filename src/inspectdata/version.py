"""Release identification."""

VERSION = "0.1.0"                    # Major.Minor.Hotfix
BUILD = "2026-10-17T00:00:00+0000"   # build stamp or commit SHA
