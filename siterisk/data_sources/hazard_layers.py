"""GeoJSON hazard layer loader."""

from pathlib import Path
from typing import Optional

import geopandas as gpd
from loguru import logger

from siterisk.geo.models import FeatureCollection
from siterisk.utils.config import get_project_root, settings
from siterisk.utils.constants import WGS84_EPSG


class HazardLayerLoader:
    """Read static hazard layers (earthquake zones, flood extent) from disk."""

    def __init__(self, earthquake_zones_path: Optional[str] = None, flood_extent_path: Optional[str] = None):
        self.earthquake_zones_path = self._resolve(earthquake_zones_path or settings.layers.earthquake_zones)
        self.flood_extent_path = self._resolve(flood_extent_path or settings.layers.flood_extent)

    def _resolve(self, path: str) -> Path:
        p = Path(path)
        return p if p.is_absolute() else get_project_root() / p

    def load(self, path: Path) -> FeatureCollection:
        """Load a layer; a missing or unreadable file yields an empty collection."""
        if not path.exists():
            logger.warning(f"Hazard layer not found: {path}")
            return FeatureCollection()

        try:
            gdf = gpd.read_file(path)
        except Exception as e:
            logger.error(f"Failed to read hazard layer {path}: {e}")
            return FeatureCollection()

        if gdf.crs is not None and gdf.crs.to_epsg() != WGS84_EPSG:
            # Layers are used as lon/lat regardless; no reprojection
            logger.warning(f"{path.name} CRS is {gdf.crs}, expected EPSG:{WGS84_EPSG}")

        collection = FeatureCollection.from_geojson(gdf.__geo_interface__)
        logger.info(f"Loaded {len(collection)} features from {path.name}")
        return collection

    def load_earthquake_zones(self) -> FeatureCollection:
        return self.load(self.earthquake_zones_path)

    def load_flood_extent(self) -> FeatureCollection:
        return self.load(self.flood_extent_path)


hazard_layer_loader = HazardLayerLoader()
