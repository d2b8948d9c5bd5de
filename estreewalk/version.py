"""Version information for estreewalk."""

# estreewalk version
ESTREEWALK_VERSION_MAJOR = 1
ESTREEWALK_VERSION_MINOR = 0
ESTREEWALK_VERSION_PATCH = 0
ESTREEWALK_VERSION = (
    f"{ESTREEWALK_VERSION_MAJOR}.{ESTREEWALK_VERSION_MINOR}.{ESTREEWALK_VERSION_PATCH}"
)

# Newest ECMAScript edition whose node types the default walkers cover
ECMA_VERSION = 2022


def get_version_string() -> str:
    """Get full version string."""
    return f"estreewalk {ESTREEWALK_VERSION} (ESTree, ES{ECMA_VERSION})"


def get_version_info() -> dict:
    """Get version information as dictionary."""
    return {
        "estreewalk": {
            "major": ESTREEWALK_VERSION_MAJOR,
            "minor": ESTREEWALK_VERSION_MINOR,
            "patch": ESTREEWALK_VERSION_PATCH,
            "version": ESTREEWALK_VERSION,
        },
        "ecmascript": {"version": ECMA_VERSION},
    }
