"""Core decision logic for PODSMITH.

This package contains:
- models: Value types shared by the commands
- versions: Tag parsing and VersionResolver
- targets: TargetSetExpander for lint arguments
- lint: LintOrchestrator
- create: SpecCreateOrchestrator
- template: Podspec and notice rendering
- search: Local spec repository index used by `spec cat`

Modules are imported directly; integrations depend on models, so this
package does not re-export them.
"""
