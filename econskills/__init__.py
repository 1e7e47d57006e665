"""econskills: download, browse and propose Awesome Econ AI skills."""

__version__ = "0.3.0"
