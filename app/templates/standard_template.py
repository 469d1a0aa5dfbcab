STANDARD_TEMPLATE = {
    "name": "Standard Business Plan",
    "description": "A traditional plan suited to lenders, investors and most small businesses.",
    "structure": [
        "Executive Summary",
        "Company Description",
        "Market Analysis",
        "Organization & Management",
        "Service or Product Line",
        "Marketing & Sales",
        "Funding Request",
        "Financial Projections",
        "Appendix"
    ]
}
