"""Features command implementation for the CLI."""

from __future__ import annotations

from typing import final

from discident.domain.features import FeatureSet
from discident.features.disc import Disc
from discident.ui.cli.args.options import FeaturesArgs
from discident.ui.cli.display.disc_info import DiscInfoDisplay


@final
class FeaturesCommand:
    """Report which features the loaded libdiscid supports."""

    def __init__(self, args: FeaturesArgs) -> None:
        self.args = args
        self.display = DiscInfoDisplay()

    def execute(self) -> dict[str, bool]:
        """Probe every feature and display the result."""

        support = {
            name: Disc.has_feature(FeatureSet.from_names([name]))
            for name in FeatureSet.ALL.names()
        }
        self.display.show_features(
            Disc.version_string(),
            Disc.default_device(),
            support,
            quiet=self.args.quiet,
        )
        return support
