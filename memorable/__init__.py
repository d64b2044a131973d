"""Memorable client.

Data-access and presentation layer for the Memorable study-materials app:
worksheets, test sheets and wrong-answer sheets, the REST client that
fetches and mutates them, and the list views that filter and bookmark them.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
