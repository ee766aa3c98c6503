"""BCC tetrahedral meshing, triangle-surface import and spatial helpers for SDFs."""