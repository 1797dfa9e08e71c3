"""External collaborators for PODSMITH.

This package contains:
- github: GitHub REST client for repository metadata
- http: httpx client factory, downloads and error translation
- git: git identity lookup for locally created specs
- validator: Spec validation through the CocoaPods CLI
"""
