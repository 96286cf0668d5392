"""
libtotp setup script
"""
#=============================================================================
# init script env -- ensure cwd = root of source dir
#=============================================================================
import os
root_dir = os.path.abspath(os.path.join(__file__, ".."))
os.chdir(root_dir)

#=============================================================================
# imports
#=============================================================================
import re
from setuptools import setup, find_packages

#=============================================================================
# version string
#=============================================================================

# pull version string from libtotp, without importing it
# (its dependencies may not be installed yet)
with open(os.path.join(root_dir, "libtotp", "__init__.py")) as fh:
    version = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.M).group(1)

#=============================================================================
# static text
#=============================================================================
SUMMARY = "TOTP (RFC 6238) two-factor authentication: secrets, codes, verification & QR provisioning"

DESCRIPTION = """\
libtotp generates shared secrets, derives time based one-time passwords
(RFC 4226 / RFC 6238) and verifies user-submitted codes within a configurable
clock-discrepancy window, using constant-time comparison.

Random sources, clocks and QR code renderers are pluggable providers;
local and web-api based implementations are included.
"""

KEYWORDS = """\
totp hotp 2fa otp one-time password authenticator
rfc6238 rfc4226 base32 qrcode
"""

CLASSIFIERS = """\
Intended Audience :: Developers
License :: OSI Approved :: MIT License
Natural Language :: English
Operating System :: OS Independent
Programming Language :: Python :: 3
Programming Language :: Python :: Implementation :: CPython
Programming Language :: Python :: Implementation :: PyPy
Topic :: Security :: Cryptography
Topic :: Software Development :: Libraries
""".splitlines()

if ".dev" in version:
    CLASSIFIERS.append("Development Status :: 3 - Alpha")
else:
    CLASSIFIERS.append("Development Status :: 5 - Production/Stable")

#=============================================================================
# run setup
#=============================================================================
setup(
    # package info
    packages=find_packages(root_dir, exclude=["tests", "tests.*"]),
    zip_safe=True,

    # metadata
    name="libtotp",
    version=version,
    license="MIT",

    description=SUMMARY,
    long_description=DESCRIPTION,
    keywords=KEYWORDS,
    classifiers=CLASSIFIERS,

    python_requires=">=3.9",
    install_requires=[
        "typing_extensions>=4.6",
        "requests>=2.25",
        "qrcode>=7.4",
        "pypng>=0.20220715.0",
    ],
    extras_require={
        "test": ["pytest>=7.0", "pytest-archon>=0.0.6"],
    },
)

#=============================================================================
# eof
#=============================================================================
