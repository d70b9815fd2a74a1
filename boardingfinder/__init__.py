"""BoardingFinder marketplace service package."""
