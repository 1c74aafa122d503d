"""GraphQL documents sent to the ZenHub API."""

from __future__ import annotations

WORKSPACE_REPOSITORIES_QUERY = """
query WorkspaceRepositories($workspaceId: ID!) {
  workspace(id: $workspaceId) {
    id
    name
    description
    repositories {
      ghId
      name
      ownerName
    }
  }
}
"""
