"""GraphQL documents used by the hierarchy provider."""

HUBS_QUERY = """
query GetHubs {
  hubs {
    results {
      id
      name
    }
  }
}
"""

PROJECTS_QUERY = """
query GetProjects($hubId: ID!, $filter: ProjectFilterInput) {
  projects(hubId: $hubId, filter: $filter) {
    results {
      id
      name
      __typename
      alternativeIdentifiers {
        dataManagementAPIProjectId
      }
    }
  }
}
"""

FOLDERS_BY_PROJECT_QUERY = """
query GetFolders($projectId: ID!, $cursor: String) {
  foldersByProject(projectId: $projectId, pagination: {cursor: $cursor}) {
    pagination {
      cursor
      pageSize
    }
    results {
      id
      name
      objectCount
    }
  }
}
"""

ITEMS_BY_PROJECT_QUERY = """
query GetFolderItemsByProject($projectId: ID!) {
  itemsByProject(projectId: $projectId) {
    results {
      __typename
      id
      name
    }
  }
}
"""

ITEMS_BY_FOLDER_QUERY = """
query GetFolderItemsByFolder($hubId: ID!, $folderId: ID!) {
  itemsByFolder(hubId: $hubId, folderId: $folderId) {
    results {
      __typename
      id
      name
    }
  }
}
"""

PROJECT_ID_QUERY = """
query GetProjectId($hubName: String!, $projectName: String!) {
  hubs(filter: {name: $hubName}) {
    results {
      projects(filter: {name: $projectName}) {
        results {
          id
        }
      }
    }
  }
}
"""

COMPONENT_VERSION_ID_QUERY = """
query GetComponentVersionId($projectId: ID!, $componentName: String!) {
  project(projectId: $projectId) {
    items(filter: {name: $componentName}) {
      results {
        ... on DesignItem {
          tipRootComponentVersion {
            id
          }
        }
      }
    }
  }
}
"""

OCCURRENCES_QUERY = """
query GetModelHierarchy($componentVersionId: ID!, $cursor: String) {
  componentVersion(componentVersionId: $componentVersionId) {
    id
    name
    allOccurrences(pagination: {cursor: $cursor}) {
      results {
        parentComponentVersion { id }
        componentVersion { id name }
      }
      pagination { cursor }
    }
  }
}
"""
