"""Small in-memory license registry for deterministic tests.

Tests build their own title matcher from this registry instead of the
bundled one, so adding licenses to the package data never changes results.
"""

from typing import List

from licensetext.config.models import NormalizerSettings
from licensetext.normalization import NormalizationContext
from licensetext.registry import LicenseEntry, StaticLicenseRegistry, TitleMatcher

MIT_TEXT = """MIT License

Copyright (c) [year] [fullname]

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""


def fixture_registry() -> StaticLicenseRegistry:
    """Registry with a handful of licenses, one hidden and one pseudo."""
    return StaticLicenseRegistry([
        LicenseEntry(key="mit", title="MIT License"),
        LicenseEntry(key="apache-2.0", title="Apache License 2.0"),
        LicenseEntry(key="gpl-3.0", title="GNU General Public License v3.0"),
        LicenseEntry(key="isc", title="ISC License", hidden=True),
        LicenseEntry(key="other", title="Other", pseudo=True),
    ])


def fixture_context(**settings) -> NormalizationContext:
    """NormalizationContext using the fixture registry and optional settings overrides."""
    return NormalizationContext(
        settings=NormalizerSettings(**settings),
        title_matcher=TitleMatcher(fixture_registry()),
    )


class CountingRegistry:
    """Registry wrapper recording how often it is queried."""

    def __init__(self, inner: StaticLicenseRegistry):
        self.inner = inner
        self.calls: List[dict] = []

    def all(self, include_hidden: bool = False, include_pseudo: bool = True):
        self.calls.append({"include_hidden": include_hidden, "include_pseudo": include_pseudo})
        return self.inner.all(include_hidden=include_hidden, include_pseudo=include_pseudo)
