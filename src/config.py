"""
Configuration settings for the path tracer
"""

# Rendering settings, overridable from the command line
RENDER_SETTINGS = {
    'width': 320,
    'height': 240,
    'samples': 16,
    'max_depth': 10,
    'workers': None,  # None uses one worker per CPU
    'seed': None,
    'output': 'render.png',
    'scene': 'spheres',
    'use_bvh': True,
}

# Named presets of samples per pixel and bounce limit
QUALITY_LEVELS = {
    'preview': {'samples': 4, 'max_depth': 4},
    'balanced': {'samples': 32, 'max_depth': 8},
    'final': {'samples': 512, 'max_depth': 10},
}

# Camera settings
CAMERA_SETTINGS = {
    'position': (0.0, 0.0, 0.0),
    'lookat': (0.0, 0.0, -1.0),
    'fov': 70.0,
    'background': (0.0, 0.0, 0.0),
}

# Offset applied to meshes loaded for the mesh scene
MESH_OFFSET = (0.0, -0.2, -1.5)

# Logging settings
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
