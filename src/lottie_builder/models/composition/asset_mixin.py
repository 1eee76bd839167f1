"""
Composition Asset Management Mixin

This mixin provides the asset operations of the Composition model,
including the merge of a foreign animation's assets.

Methods:
    Asset CRUD:
        - get_asset
        - add_asset
        - remove_asset
        - remove_unused_assets
        - get_asset_ref_count

    Merge:
        - _add_assets
        - _get_matching_asset
        - _asset_key_comparer
        - _remap_layer_refs
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from lottie_builder.constants import (
    KEY_ASSETS, KEY_ID, KEY_LAYERS, KEY_REF_ID, PRECOMP_ASSET_PREFIX,
)
from lottie_builder.utils.structural import ary_remove_item, deep_compare

from ._internal.asset import Asset


class CompositionAssetMixin:
    """Mixin providing asset management for Composition

    This mixin assumes the parent class has:
        - self._source: root document (dict with an 'assets' list)
        - self.assets: list of Asset wrappers, 1:1 with the 'assets' list
        - self._asset_lookup: dict of id -> Asset
        - self._id_generator: callable returning fresh id strings
        - self._logger: logging.Logger instance
        - self.notify_source_change(): source-changed notification
    """

    @property
    def _source_assets(self) -> List[Dict[str, Any]]:
        return self._source[KEY_ASSETS]

    # ========================================
    # Asset CRUD Operations
    # ========================================

    def get_asset(self, asset_id: str) -> Optional[Asset]:
        """Asset with the given id, or None"""
        return self._asset_lookup.get(asset_id)

    def add_asset(self, asset_source: Dict[str, Any], trigger_source_change: bool = True) -> Asset:
        """Append an asset fragment (inserted as-is, not copied)"""
        if not isinstance(asset_source, dict):
            raise TypeError(f"Expected dict asset source, got {type(asset_source).__name__}")

        self._source_assets.append(asset_source)
        asset = Asset(asset_source)
        self.assets.append(asset)
        self._update_asset_lookup()
        self._logger.debug(f"Added asset {asset.id!r}")

        if trigger_source_change:
            self.notify_source_change()
        return asset

    def remove_asset(self, asset_id: str, trigger_source_change: bool = True) -> bool:
        """Remove an asset by id

        Assets referenced only from this asset's nested layers are removed
        with it.

        Returns:
            False if no asset has that id
        """
        asset = self._asset_lookup.get(asset_id)
        if asset is None:
            return False

        asset_source = asset.get_source()
        ary_remove_item(self._source_assets, asset_source)
        ary_remove_item(self.assets, asset)
        self._update_asset_lookup()
        self._logger.debug(f"Removed asset {asset_id!r}")

        for layer_source in asset_source.get(KEY_LAYERS) or []:
            ref_id = layer_source.get(KEY_REF_ID) if isinstance(layer_source, dict) else None
            if ref_id and self.get_asset_ref_count(ref_id) == 0:
                self.remove_asset(ref_id, False)

        if trigger_source_change:
            self.notify_source_change()
        return True

    def remove_unused_assets(self, trigger_source_change: bool = True) -> int:
        """Remove every asset nothing references

        Returns:
            Number of assets removed (cascaded removals included)
        """
        before = len(self.assets)
        for asset_id in [asset.id for asset in self.assets]:
            if asset_id in self._asset_lookup and self.get_asset_ref_count(asset_id) == 0:
                self.remove_asset(asset_id, False)

        removed = before - len(self.assets)
        if removed and trigger_source_change:
            self.notify_source_change()
        return removed

    def get_asset_ref_count(self, asset_id: str) -> int:
        """Number of layers (top level and inside assets) whose refId is asset_id"""
        count = _layer_ref_count(self._source[KEY_LAYERS], asset_id)
        for asset_source in self._source_assets:
            count += _layer_ref_count(asset_source.get(KEY_LAYERS), asset_id)
        return count

    def _update_asset_lookup(self) -> None:
        lookup = {}
        for asset in self.assets:
            asset_id = asset.id
            if asset_id and asset_id not in lookup:
                lookup[asset_id] = asset
        self._asset_lookup = lookup

    def _get_unique_asset_id(self, prefix: str = PRECOMP_ASSET_PREFIX) -> str:
        return f"{prefix}_{self._id_generator()}"

    # ========================================
    # Merge
    # ========================================

    def _add_assets(self, animation: Dict[str, Any], trigger_source_change: bool = True) -> None:
        """Merge the assets of a foreign animation into this composition

        Mutates animation: colliding asset ids are replaced, either by the id
        of an equivalent existing asset (which is then reused) or by a fresh
        id, and every refId in the animation's layers and in its assets'
        nested layers is rewritten to match.
        """
        assets = animation.get(KEY_ASSETS)
        if not assets:
            return

        layers = animation.get(KEY_LAYERS)
        # Only assets present before this import are candidates for reuse
        stop_index = len(self.assets)

        for incoming in assets:
            asset_id = incoming.get(KEY_ID)
            add = True
            if asset_id in self._asset_lookup:
                match = self._get_matching_asset(incoming, assets, stop_index)
                if match is not None:
                    add = False
                if match is None or match.get(KEY_ID) != asset_id:
                    new_id = match[KEY_ID] if match is not None else self._get_unique_asset_id(asset_id)
                    incoming[KEY_ID] = new_id
                    if layers:
                        _remap_layer_refs(layers, asset_id, new_id)
                    for asset_source in assets:
                        _remap_layer_refs(asset_source.get(KEY_LAYERS), asset_id, new_id)
                    self._logger.debug(
                        f"Asset {asset_id!r} {'merged into' if match is not None else 'renamed to'} {new_id!r}")
                else:
                    self._logger.debug(f"Asset {asset_id!r} already present")

            if add:
                self.add_asset(incoming, False)

        if trigger_source_change:
            self.notify_source_change()

    def _get_matching_asset(self, asset: Dict[str, Any], incoming_assets: Optional[List[Dict[str, Any]]],
                            stop_index: Optional[int] = None) -> Optional[Dict[str, Any]]:
        """First existing asset fragment structurally equal to asset

        Args:
            asset: Candidate (incoming) asset fragment
            incoming_assets: All assets of the animation being imported,
                used to resolve the candidate's refIds
            stop_index: Only the first stop_index existing assets are searched

        Returns:
            Matching existing fragment, or None
        """
        candidates = self._source_assets if stop_index is None else self._source_assets[:stop_index]
        state = _MatchState(incoming_assets or [], self.config.max_depth)
        for existing in candidates:
            if deep_compare(asset, existing, self._asset_key_comparer, state, state.max_depth):
                return existing
        return None

    def _asset_key_comparer(self, key: str, depth: int, new_asset: Dict[str, Any],
                            existing_asset: Dict[str, Any], state: '_MatchState') -> Optional[bool]:
        """Key hook for deep_compare when matching incoming against existing assets

        - the asset's own id (depth 0) never decides equality
        - differing refIds are equal when the assets they point to are
        - a refId that cannot be resolved on either side is a mismatch
        - reaching the same pair of refIds again (a reference cycle) is a mismatch
        """
        if depth == 0:
            return True if key == KEY_ID else None

        if key != KEY_REF_ID:
            return None
        new_ref = new_asset.get(KEY_REF_ID)
        existing_ref = existing_asset.get(KEY_REF_ID)
        if not new_ref or new_ref == existing_ref:
            return None

        incoming_refed = None
        for incoming in state.incoming_assets:
            if isinstance(incoming, dict) and incoming.get(KEY_ID) == new_ref:
                incoming_refed = incoming
                break
        existing = self.get_asset(existing_ref) if isinstance(existing_ref, str) else None
        if incoming_refed is None or existing is None:
            return False

        pair = (new_ref, existing_ref)
        if pair in state.visited:
            self._logger.debug(f"Reference cycle through {new_ref!r} and {existing_ref!r}, treating as different")
            return False

        nested = _MatchState(state.incoming_assets, state.max_depth - depth, state.visited | {pair})
        return deep_compare(incoming_refed, existing.get_source(), self._asset_key_comparer,
                            nested, nested.max_depth)


@dataclass(frozen=True)
class _MatchState:
    """deep_compare state for asset matching"""
    incoming_assets: List[Dict[str, Any]]
    max_depth: int
    visited: FrozenSet[Tuple[str, str]] = frozenset()


def _layer_ref_count(layers: Optional[List[Any]], asset_id: str) -> int:
    if not layers:
        return 0
    return sum(1 for layer in layers if isinstance(layer, dict) and layer.get(KEY_REF_ID) == asset_id)


def _remap_layer_refs(layers: Optional[List[Any]], asset_id: str, new_id: str) -> None:
    """Point every layer referencing asset_id at new_id"""
    for layer in layers or []:
        if isinstance(layer, dict) and layer.get(KEY_REF_ID) == asset_id:
            layer[KEY_REF_ID] = new_id
