"""Package metadata and naming constants."""

PACKAGE_NAME = "design-patterns-handbook"
PACKAGE_NAME_SHORT = "patterns"
DESCRIPTION = "Seven classic object-oriented design patterns with runnable demonstrations"
