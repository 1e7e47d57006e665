"""Centralized constants for the econskills package."""

# Canonical GitHub repository holding the skill sources
GITHUB_REPO = "meleantonio/awesome-econ-ai-stuff"
GITHUB_BRANCH = "main"
RAW_CONTENT_HOST = "raw.githubusercontent.com"

# Where the static site is deployed
SITE_ORIGIN = "https://meleantonio.github.io"
DEPLOYMENT_SUBPATH = "/awesome-econ-ai-stuff"

# Skill layout: the site serves /skills/... but the repo stores _skills/...
SKILL_FILENAME = "SKILL.md"
SKILLS_SOURCE_DIR = "_skills"
PUBLIC_SKILLS_SEGMENT = "/skills/"
INTERNAL_SKILLS_SEGMENT = "_skills/"

# Bulk download archive
ARCHIVE_FILENAME = "awesome-econ-ai-skills.zip"
ARCHIVE_ROOT = "skills"

# Control labels
DOWNLOAD_ALL_LABEL = "Download All Skills"
DOWNLOAD_SKILL_LABEL = "Download SKILL.md"
BUSY_LABEL = "Downloading..."

DEFAULT_TIMEOUT = 30.0
