"""Metaball field simulation with half-block terminal and pixel-grid renderers."""