from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

URI_SCHEME = "gridiron://"
MARKDOWN = "text/markdown"


@dataclass(frozen=True)
class ResourceSpec:
    path: str
    name: str
    filename: str
    category: str
    label: str
    summary: str
    mime_type: str = MARKDOWN

    @property
    def uri(self) -> str:
        return URI_SCHEME + self.path


RESOURCE_CATALOG: Tuple[ResourceSpec, ...] = (
    # Project
    ResourceSpec(
        path="project/overview",
        name="Gridiron Project Overview - Vision, repos, tech stack",
        filename="project-overview.md",
        category="project",
        label="Project Overview",
        summary="Vision, repos, tech stack",
    ),
    ResourceSpec(
        path="project/repos",
        name="Repository Structure - All repos and their purposes",
        filename="repository-map.md",
        category="project",
        label="Repository Map",
        summary="All repos and purposes",
    ),
    ResourceSpec(
        path="project/architecture",
        name="System Architecture - How components interact",
        filename="architecture.md",
        category="project",
        label="System Architecture",
        summary="Component interactions",
    ),
    # Coding guidelines
    ResourceSpec(
        path="guidelines/csharp",
        name="C# Coding Guidelines - Backend API patterns",
        filename="guidelines-csharp.md",
        category="guidelines",
        label="C# Guidelines",
        summary="Backend API patterns",
    ),
    ResourceSpec(
        path="guidelines/typescript",
        name="TypeScript/React Guidelines - Frontend patterns",
        filename="guidelines-typescript.md",
        category="guidelines",
        label="TypeScript/React Guidelines",
        summary="Frontend patterns",
    ),
    ResourceSpec(
        path="guidelines/testing",
        name="Testing Guidelines - All repos",
        filename="guidelines-testing.md",
        category="guidelines",
        label="Testing Guidelines",
        summary="All repos",
    ),
    ResourceSpec(
        path="guidelines/git",
        name="Git Workflow - Branching, commits, PRs",
        filename="guidelines-git.md",
        category="guidelines",
        label="Git Workflow",
        summary="Branching, commits, PRs",
    ),
    ResourceSpec(
        path="guidelines/architecture-principles",
        name="Architecture Principles - Repository pattern, data access rules",
        filename="architecture-principles.md",
        category="guidelines",
        label="Architecture Principles",
        summary="Repository pattern, data access",
    ),
    # Simulation engine
    ResourceSpec(
        path="engine/philosophy",
        name="Simulation Philosophy - Outcome-first approach",
        filename="engine-philosophy.md",
        category="engine",
        label="Simulation Philosophy",
        summary="Outcome-first approach",
    ),
    ResourceSpec(
        path="engine/statistical-targets",
        name="Statistical Targets - NFL statistics to match",
        filename="statistical-targets.md",
        category="engine",
        label="Statistical Targets",
        summary="NFL statistics to match",
    ),
    ResourceSpec(
        path="engine/attribute-mappings",
        name="Attribute Mappings - Player attributes to probabilities",
        filename="attribute-mappings.md",
        category="engine",
        label="Attribute Mappings",
        summary="Player attributes to probabilities",
    ),
    # Frontend design
    ResourceSpec(
        path="frontend/design-system",
        name="Frontend Design System - Colors, typography, components",
        filename="frontend-design.md",
        category="frontend",
        label="Design System",
        summary="Colors, typography, components",
    ),
    # Agent personas
    ResourceSpec(
        path="agents/dev",
        name="Development Agent Persona",
        filename="agent-dev.md",
        category="agents",
        label="Dev Agent",
        summary="Development persona",
    ),
    ResourceSpec(
        path="agents/plan",
        name="Planning Agent Persona",
        filename="agent-plan.md",
        category="agents",
        label="Plan Agent",
        summary="Planning persona",
    ),
    ResourceSpec(
        path="agents/qa",
        name="QA/Testing Agent Persona",
        filename="agent-qa.md",
        category="agents",
        label="QA Agent",
        summary="Testing persona",
    ),
    ResourceSpec(
        path="agents/review",
        name="Code Review Agent Persona",
        filename="agent-review.md",
        category="agents",
        label="Review Agent",
        summary="Code review persona",
    ),
    ResourceSpec(
        path="agents/requirements",
        name="Requirements Agent Persona",
        filename="agent-requirements.md",
        category="agents",
        label="Requirements Agent",
        summary="Requirements refinement persona",
    ),
    # Roadmap
    ResourceSpec(
        path="roadmap",
        name="Project Roadmap and Milestones",
        filename="roadmap.md",
        category="roadmap",
        label="Roadmap",
        summary="Project milestones",
    ),
)


__all__ = ["MARKDOWN", "RESOURCE_CATALOG", "ResourceSpec", "URI_SCHEME"]
