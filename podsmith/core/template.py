"""Text templates for `spec create`.

Pure formatting: the podspec stub and the reminder shown when a
repository has no semantic version tags.
"""

from __future__ import annotations

from podsmith.core.models import RenderableSpecData

_RULE = "―" * 60


def escape_double_quotes(value: str) -> str:
    return value.replace('"', '\\"')


def render_podspec(data: RenderableSpecData) -> str:
    """Render the podspec stub for the given data."""
    ref_key = f":{data.ref_kind.value}"
    return f"""#
# Be sure to run `podsmith spec lint {data.file_name}' to ensure this is a
# valid spec.
#
# Remove all comments before submitting the spec. Optional attributes are commented.
#
# For details see: https://guides.cocoapods.org/syntax/podspec.html
#
Pod::Spec.new do |s|
  s.name         = "{data.name}"
  s.version      = "{data.version}"
  s.summary      = "{data.summary}"
  # s.description  = <<-DESC
  #                   An optional longer description of {data.name}
  #
  #                   * Markdown format.
  #                   * Don't worry about the indent, we strip it!
  #                  DESC
  s.homepage     = "{data.homepage}"

  # Specify the license type. CocoaPods detects automatically the license file if it is named
  # `LICEN{{C,S}}E*.*', however if the name is different, specify it.
  s.license      = '{data.license}'
  # s.license      = {{ :type => '{data.license}', :file => 'FILE_LICENSE' }}

  # Specify the authors of the library, with email addresses. You can often find
  # the email addresses of the authors by using the SCM log. E.g. $ git log
  #
  s.author       = {{ "{data.author_name}" => "{data.author_email}" }}
  # s.authors      = {{ "{data.author_name}" => "{data.author_email}", "other author" => "and email address" }}

  # Specify the location from where the source should be retrieved.
  #
  s.source       = {{ :git => "{data.source_url}", {ref_key} => "{data.ref_value}" }}

  # If this Pod runs only on iOS or OS X, then specify the platform and
  # the deployment target.
  #
  # s.platform     = :ios, '12.0'

  # If this Pod runs on both platforms, then specify the deployment
  # targets.
  #
  # s.ios.deployment_target = '12.0'
  # s.osx.deployment_target = '10.13'

  # A list of file patterns which select the source files that should be
  # added to the Pods project. If the pattern is a directory then the
  # path will automatically have '*.{{h,m,mm,c,cpp}}' appended.
  #
  s.source_files = 'Classes', 'Classes/**/*.{{h,m}}'

  # A list of file patterns which select the header files that should be
  # made available to the application.
  #
  # s.public_header_files = 'Classes/**/*.h'

  # A list of resources included with the Pod.
  #
  # s.resources = "Resources/*.png"

  # Specify a list of frameworks and libraries that the application needs
  # to link against for this Pod to work.
  #
  # s.frameworks = 'SomeFramework', 'AnotherFramework'
  # s.libraries = 'iconv', 'xml2'

  # If this Pod uses ARC, specify it like so.
  #
  # s.requires_arc = true

  # Finally, specify any Pods that this Pod depends on.
  #
  # s.dependency 'JSONKit', '~> 1.4'
end
"""


def render_semver_notice(repo_id: str, pod_name: str) -> str:
    """Render the reminder asking upstream to add semantic version tags.

    Args:
        repo_id: GitHub repository as OWNER/REPO
        pod_name: Name of the pod the spec was created for
    """
    return f"""
{_RULE} MARKDOWN TEMPLATE

I've recently added [{pod_name}](https://github.com/CocoaPods/Specs/tree/master/Specs/{pod_name}) to the [CocoaPods](https://github.com/CocoaPods/CocoaPods) package manager repo.

CocoaPods is a tool for managing dependencies for OSX and iOS Xcode projects and provides a central repository for iOS/OSX libraries. This makes adding libraries to a project and updating them extremely easy and it will help users to resolve dependencies of the libraries they use.

However, {pod_name} doesn't have any version tags. I've added the current HEAD as version 0.0.1, but a version tag will make dependency resolution much easier.

[Semantic version](https://semver.org) tags (instead of plain commit hashes/revisions) allow for resolution of cross-dependencies.

In case you didn't know this yet; you can tag the current HEAD as, for instance, version 1.0.0, like so:

```
$ git tag -a 1.0.0 -m "Tag release 1.0.0"
$ git push --tags
```

{_RULE} TEMPLATE END

[!] This repo does not appear to have semantic version tags.

After committing the specification, consider opening a ticket with the template displayed above:
  - link:  https://github.com/{repo_id}/issues/new
  - title: Please add semantic version tags
"""


__all__ = [
    "escape_double_quotes",
    "render_podspec",
    "render_semver_notice",
]
