"""GraphQL documents used against the orb registry."""

from __future__ import annotations

from typing import Final

NAMESPACE_ORBS_PAGE_SIZE: Final[int] = 20
ORB_VERSION_HISTORY_COUNT: Final[int] = 200

ORB_VERSION_QUERY: Final[str] = f"""
query($orbVersionRef: String!) {{
  orbVersion(orbVersionRef: $orbVersionRef) {{
    id
    version
    orb {{
      id
      createdAt
      name
      namespace {{
        name
      }}
      versions(count: {ORB_VERSION_HISTORY_COUNT}) {{
        createdAt
        version
      }}
    }}
    source
    createdAt
  }}
}}
"""

# only the latest version of each orb is requested
NAMESPACE_ORBS_QUERY: Final[str] = f"""
query namespaceOrbs($namespace: String, $after: String!) {{
  registryNamespace(name: $namespace) {{
    name
    id
    orbs(first: {NAMESPACE_ORBS_PAGE_SIZE}, after: $after) {{
      edges {{
        cursor
        node {{
          versions(count: 1) {{
            source
            id
            version
            createdAt
          }}
          name
          id
          createdAt
        }}
      }}
      pageInfo {{
        hasNextPage
      }}
    }}
  }}
}}
"""

NAMESPACE_ID_QUERY: Final[str] = """
query($name: String!) {
  registryNamespace(name: $name) {
    id
  }
}
"""

ORB_EXISTS_QUERY: Final[str] = """
query($name: String!, $namespace: String) {
  orb(name: $name) {
    id
    isPrivate
  }
  registryNamespace(name: $namespace) {
    id
  }
}
"""

ORB_ID_QUERY: Final[str] = """
query($name: String!, $namespace: String) {
  orb(name: $name) {
    id
  }
  registryNamespace(name: $namespace) {
    id
  }
}
"""

IMPORT_NAMESPACE_MUTATION: Final[str] = """
mutation($name: String!) {
  importNamespace(name: $name) {
    namespace {
      id
    }
    errors {
      message
      type
    }
  }
}
"""

IMPORT_ORB_MUTATION: Final[str] = """
mutation($name: String!, $registryNamespaceId: UUID!) {
  importOrb(name: $name, registryNamespaceId: $registryNamespaceId) {
    orb {
      id
    }
    errors {
      message
      type
    }
  }
}
"""

IMPORT_ORB_VERSION_MUTATION: Final[str] = """
mutation($config: String!, $orbId: UUID!, $version: String!) {
  importOrbVersion(orbId: $orbId, orbYaml: $config, version: $version) {
    orb {
      version
    }
    errors {
      message
    }
  }
}
"""
