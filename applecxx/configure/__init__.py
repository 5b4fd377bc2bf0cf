# SPDX-License-Identifier: MIT
"""Inputs to toolchain resolution: platforms, SDK paths, tools, overrides."""
