from .map_dump import dump_level, render_map, write_map_dump

__all__ = ['dump_level', 'render_map', 'write_map_dump']
