# SPDX-License-Identifier: MIT
"""Resolved tool and toolchain values."""
