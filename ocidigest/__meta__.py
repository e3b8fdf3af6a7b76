# -*- coding: utf-8 -*-
"""Define project metadata
"""

__title__ = "ocidigest"
__summary__ = "Content-addressable digests: parse, hash, measure and verify."
__url__ = "https://github.com/ocidigest/ocidigest"

__version__ = "0.1.0"

# fs imports pkg_resources, which newer setuptools releases no longer ship.
__install_requires__ = ["fs>=2.4.16", "setuptools<81"]
__tests_require__ = ["pytest", "tox"]

__author__ = "ocidigest contributors"
__email__ = "ocidigest@users.noreply.github.com"

__license__ = "MIT License"
