FOOD_BUSINESS_TEMPLATE = {
    "name": "Food Business Plan",
    "description": "Focus on menu development, sourcing, and health regulations.",
    "structure": [
        "Executive Summary",
        "Business Concept",
        "Menu & Products",
        "Target Market",
        "Competitor Analysis",
        "Operations Plan",
        "Supply Chain",
        "Marketing Strategy",
        "Financial Projections",
        "Sustainability Plan"
    ]
}
