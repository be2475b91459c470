# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the linkdb documentation."""

project = "linkdb"
author = "LinkDB Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
