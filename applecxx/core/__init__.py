# SPDX-License-Identifier: MIT
"""Core flag composition and error types."""
