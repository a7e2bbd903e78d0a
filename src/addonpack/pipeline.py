"""Config-driven entry points for add-on upload and update handling."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from addonpack.config.models import AddonPackConfig
from addonpack.sync.differ import build_hashlist, contains
from addonpack.sync.updatepack import UpdatePack, make_update_pack
from addonpack.tree.convert import dump_tree, parse_tree
from addonpack.tree.models import DirNode
from addonpack.validation.checker import AdmissionReport, check_addon

logger = logging.getLogger(__name__)


class AddonPipeline:
    """Parses, admits and diffs add-on trees using one :class:`AddonPackConfig`."""

    def __init__(self, config: AddonPackConfig | None = None) -> None:
        self.config = config or AddonPackConfig()

    def ingest(self, data: Mapping) -> DirNode:
        """Parse a host attribute tree with the configured depth limit and escaping."""
        return parse_tree(
            data,
            escaped=self.config.tree.escaped_contents,
            max_depth=self.config.tree.max_depth,
        )

    def admit(self, addon_name: str, data: Mapping) -> tuple[DirNode, AdmissionReport]:
        """Parse an upload and run every name check over it."""
        tree = self.ingest(data)
        report = check_addon(addon_name, tree)
        if report.valid:
            logger.info("Accepted add-on %s", addon_name)
        return tree, report

    def hashlist(self, tree: DirNode) -> dict:
        """Hash list of *tree*, rendered for the host container."""
        return dump_tree(build_hashlist(tree, max_workers=self.config.sync.hash_workers))

    def is_up_to_date(self, client_hashlist: Mapping, server_tree: DirNode) -> bool:
        """Whether the client already holds every file of *server_tree*."""
        return contains(self.ingest(client_hashlist), server_tree)

    def update_pack(self, client_hashlist: Mapping, server_tree: DirNode) -> UpdatePack:
        """Pack bringing a client described by its hash list up to *server_tree*."""
        return make_update_pack(self.ingest(client_hashlist), server_tree)

    def render(self, pack: UpdatePack) -> dict:
        return pack.to_mapping(escaped=self.config.tree.escaped_contents)
