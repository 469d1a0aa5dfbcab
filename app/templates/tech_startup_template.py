TECH_STARTUP_TEMPLATE = {
    "name": "Tech Startup Plan",
    "description": "Problem, solution and traction first, for pitching to venture investors.",
    "structure": [
        "Problem",
        "Solution",
        "Market Opportunity",
        "Competition",
        "Technology Stack",
        "Business Model",
        "Go-to-Market Strategy",
        "Team",
        "Traction",
        "Funding Requirements",
        "Financial Projections"
    ]
}
