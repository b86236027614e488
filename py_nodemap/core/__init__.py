"""
Core node map generation functionality.
"""

from .alea_prng import AleaPRNG, NumpyRandom, RandomSource, make_random_source
from ..errors import ConfigurationError, MaskLookupOutOfBounds
from .spatial_mask import SpatialMask
from .nodes import Node, NodeFactory, NodeVariant
from .placement import NodePlacer, PlacementReport
from .connection import ConnectionOutcome, ConnectionReport, GraphConnector, rank_candidates
from .cleanup import CleanupReport, GraphCleaner
from .pipeline import GenerationPipeline, GenerationResult, generate_node_map
from .export import NodeMapExport, NodeRecord, export_node_map

__all__ = ['AleaPRNG', 'NumpyRandom', 'RandomSource', 'make_random_source',
           'ConfigurationError', 'MaskLookupOutOfBounds', 'SpatialMask',
           'Node', 'NodeFactory', 'NodeVariant', 'NodePlacer', 'PlacementReport',
           'ConnectionOutcome', 'ConnectionReport', 'GraphConnector', 'rank_candidates',
           'CleanupReport', 'GraphCleaner', 'GenerationPipeline', 'GenerationResult',
           'generate_node_map', 'NodeMapExport', 'NodeRecord', 'export_node_map']
