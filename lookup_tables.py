"""Static reference data served by the lookup tools."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from documents import NOT_FOUND
from resource_docs import RESOURCE_CATALOG, ResourceSpec


class LookupTable:
    """Read-only mapping from a string key to a plain result object.

    Tools that take no arguments are backed by a table with a single entry
    stored under ``SINGLE_KEY``.
    """

    SINGLE_KEY = ""

    def __init__(self, name: str, entries: Mapping[str, Any]) -> None:
        self.name = name
        self._entries: Dict[str, Any] = dict(entries)

    @classmethod
    def single(cls, name: str, value: Any) -> "LookupTable":
        return cls(name, {cls.SINGLE_KEY: value})

    def keys(self) -> List[str]:
        return list(self._entries)

    def get(self, key: Optional[str] = None) -> Any:
        return self._entries.get(self.SINGLE_KEY if key is None else key, NOT_FOUND)


REPO_INFO: Dict[str, Any] = {
    "gridiron": {
        "name": "gridiron",
        "description": "C# .NET 8 API backend",
        "language": "C#",
        "framework": ".NET 8",
        "database": "Azure SQL with Entity Framework Core 8",
        "testing": "MSTest (839 tests)",
        "purpose": "REST API, authentication, data persistence, game management services",
        "architecture": "Controllers → Services → Repositories",
        "keyProjects": [
            "Gridiron.WebApi - REST API",
            "DomainObjects - Domain models",
            "DataAccessLayer - EF Core persistence",
            "GameManagement - Player/team builder services",
        ],
        "githubProject": "Project 1 (Gridiron Roadmap)",
        "projectUrl": "https://github.com/orgs/merciless-creations/projects/1",
        "repoUrl": "https://github.com/merciless-creations/gridiron",
    },
    "gridiron-web": {
        "name": "gridiron-web",
        "description": "React/TypeScript frontend",
        "language": "TypeScript",
        "framework": "React 18",
        "buildTool": "Vite",
        "styling": "TailwindCSS",
        "stateManagement": "TanStack Query (React Query)",
        "auth": "Azure AD B2C / MSAL",
        "testing": "Vitest (unit), Playwright (E2E)",
        "hosting": "Azure Static Web Apps",
        "purpose": "User interface, client-side logic, API integration",
        "designSystem": "Dark mode, sports broadcast aesthetic",
        "githubProject": "Project 3 (Web Roadmap)",
        "projectUrl": "https://github.com/orgs/merciless-creations/projects/3",
        "repoUrl": "https://github.com/merciless-creations/gridiron-web",
    },
    "gridiron-engine": {
        "name": "gridiron-engine",
        "description": "State machine-based NFL football simulation engine",
        "language": "C#",
        "framework": ".NET",
        "testing": "800+ unit tests",
        "distribution": "NuGet package on GitHub Packages",
        "purpose": "Play-by-play simulation, outcome calculation, game state management",
        "keyFeatures": [
            "19 game states with Stateless library",
            "Probability-driven outcomes based on player skills",
            "Deterministic simulation with seed support",
            "Penalty system, injury tracking, clock management",
        ],
        "philosophy": "Outcome-first - determines what happened, not formations/play names",
        "keyFiles": [
            "Simulation/Configuration/GameProbabilities.cs - All probability constants",
            "Simulation/Decision/ - Decision engines",
            "Simulation/Mechanics/ - Game mechanics",
        ],
        "githubProject": "Project 2 (Engine Roadmap)",
        "projectUrl": "https://github.com/orgs/merciless-creations/projects/2",
        "repoUrl": "https://github.com/merciless-creations/gridiron-engine",
    },
    "gridiron-meta": {
        "name": "gridiron-meta",
        "description": "Shared configuration and tooling for the multi-repo project",
        "purpose": "Claude Code shared commands, MCP server, cross-repo documentation",
        "contains": [
            ".claude/commands/ - Shared slash commands (dev, plan, qa, requirements, review)",
            "CLAUDE.md - Shared project instructions",
            "mcp-server/ - This MCP server",
        ],
        "parentProject": "Goal To Go Football (Project 4)",
        "projectUrl": "https://github.com/orgs/merciless-creations/projects/4",
    },
}


GITHUB_PROJECTS: Dict[str, Any] = {
    "parent": {
        "name": "Goal To Go Football",
        "projectNumber": 4,
        "url": "https://github.com/orgs/merciless-creations/projects/4",
        "usage": "Parent/epic issues that span multiple repos",
        "assignCommand": 'gh issue create --project "Goal To Go Football"',
    },
    "gridiron": {
        "name": "Gridiron Roadmap",
        "projectNumber": 1,
        "url": "https://github.com/orgs/merciless-creations/projects/1",
        "usage": "API backend issues (C# .NET)",
        "assignCommand": 'gh issue create --project "Gridiron Roadmap"',
    },
    "gridiron-web": {
        "name": "Web Roadmap",
        "projectNumber": 3,
        "url": "https://github.com/orgs/merciless-creations/projects/3",
        "usage": "Frontend issues (React/TypeScript)",
        "assignCommand": 'gh issue create --project "Web Roadmap"',
    },
    "gridiron-engine": {
        "name": "Engine Roadmap",
        "projectNumber": 2,
        "url": "https://github.com/orgs/merciless-creations/projects/2",
        "usage": "Game simulation engine issues",
        "assignCommand": 'gh issue create --project "Engine Roadmap"',
    },
}


TECH_STACK: Dict[str, Any] = {
    "backend": {
        "language": "C# 12",
        "framework": ".NET 8",
        "database": "Azure SQL",
        "orm": "Entity Framework Core 8",
        "stateMachine": "Stateless library",
        "testing": "MSTest (839+ tests)",
        "hosting": "Azure",
    },
    "frontend": {
        "language": "TypeScript",
        "framework": "React 18",
        "buildTool": "Vite",
        "styling": "TailwindCSS",
        "routing": "React Router v6",
        "stateManagement": "TanStack Query (React Query)",
        "httpClient": "Axios",
        "auth": "Azure AD B2C / MSAL",
        "unitTesting": "Vitest + React Testing Library + MSW",
        "e2eTesting": "Playwright",
        "hosting": "Azure Static Web Apps",
    },
    "engine": {
        "language": "C#",
        "framework": ".NET",
        "pattern": "State machine (19 states)",
        "distribution": "NuGet package on GitHub Packages",
        "testing": "800+ unit tests",
        "features": [
            "Probability-driven outcomes",
            "Deterministic simulation with seeds",
            "Complete NFL rules (downs, penalties, injuries)",
        ],
    },
    "devOps": {
        "versionControl": "Git / GitHub",
        "ci": "GitHub Actions",
        "projects": "GitHub Projects (4 boards)",
        "organization": "merciless-creations",
    },
}


HARD_RULES: Dict[str, Any] = {
    "git": {
        "rule": "NEVER commit or push directly to main/master",
        "reason": "Violations break CI/CD and require manual cleanup",
        "process": [
            "1. Create feature branch from master",
            "2. Make changes and commit to feature branch",
            "3. Push feature branch to origin",
            "4. Create Pull Request",
            "5. Wait for approval - Scott merges after CI passes",
        ],
        "branchNaming": {
            "feature/": "New features or enhancements",
            "fix/": "Bug fixes",
            "chore/": "Maintenance, refactoring, docs",
        },
    },
    "architecture": {
        "rule": "ONLY the DataAccessLayer project may access the database",
        "reason": "Separation of concerns, testability, maintainability",
        "forbidden": [
            "GridironDbContext references outside DataAccessLayer",
            "Direct use of DbContext, DbSet<T>, or Entity Framework",
            "LINQ queries against the database outside repositories",
            "Include(), FirstOrDefaultAsync(), ToListAsync() outside DAL",
        ],
        "allowed": [
            "Repository interfaces (ITeamRepository, etc.)",
            "Calling repository methods like GetByIdAsync(), AddAsync()",
        ],
    },
    "testing": {
        "rule": "ALL tests must be deterministic",
        "forbidden": [
            "Random values without fixed seeds",
            "Conditional assertions based on random outcomes",
            "Time-dependent assertions without mocking",
            "Tests that depend on external state",
        ],
        "required": "Use fixed seeds: var game = new Game { RandomSeed = 12345 };",
    },
    "interaction": {
        "rule": "WAIT FOR EXPLICIT APPROVAL before implementing",
        "process": [
            "Plan first - analyze and propose before coding",
            "Document before coding - agree on HOW before WHAT",
            "One step at a time - don't chain assumptions",
            "Ask Scott when uncertain - do not assume or estimate",
        ],
    },
    "engine": {
        "rule": "Do NOT model formations, play names, or presentation concerns",
        "reason": "Engine outputs what happened; presentation adds flavor",
        "forbidden": [
            "Formation names in simulation logic",
            "Specific play names",
            "Audibles or pre-snap reads",
            "Motion and shifts",
            "Broadcast-style presentation",
        ],
    },
}


CONSTANTS_INFO: Dict[str, Any] = {
    "location": "gridiron-engine/src/Gridiron.Engine/Simulation/Configuration/GameProbabilities.cs",
    "rule": "ALL probability values, thresholds, and configuration constants MUST be defined here",
    "structure": "Nested static classes organized by domain",
    "existingDomains": [
        "Passing - completion rates, interception chances",
        "Rushing - tackle break rates, big run chances",
        "Turnovers - fumble rates, recovery rates",
        "FieldGoals - make percentages by distance",
        "Kickoffs - touchback rates, return averages",
        "Punts - gross yards, net yards, inside-20",
        "GameDecisions - play type selection weights",
        "FourthDown - go-for-it probabilities, field position thresholds",
        "Timeouts - timeout thresholds, ice kicker probability",
    ],
    "usage": "Reference as GameProbabilities.DomainName.CONSTANT_NAME",
    "addingNew": "When adding new simulation logic, add a new nested class to GameProbabilities.cs",
}


def resource_index(specs: Iterable[ResourceSpec] = RESOURCE_CATALOG) -> Dict[str, List[Dict[str, str]]]:
    """Group the resource catalog by category, preserving catalog order."""
    index: Dict[str, List[Dict[str, str]]] = {}
    for spec in specs:
        index.setdefault(spec.category, []).append(
            {"uri": spec.uri, "title": spec.label, "description": spec.summary}
        )
    return index
