"""Default IELTS Task 2 prompts loaded into every fresh prompt repository, plus the editor's writing tips."""
from __future__ import annotations
from typing import List

DEFAULT_PROMPTS: List[dict] = [
    {
        "category": "Technology & Society",
        "title": "Social Media Impact",
        "content": (
            "Some people think that modern technology is making people less socially active, "
            "while others believe it helps people to be more connected. Discuss both views and "
            "give your own opinion. Write at least 250 words."
        ),
        "difficulty": "intermediate",
        "time_limit": 40,
    },
    {
        "category": "Environment",
        "title": "Climate Change Solutions",
        "content": (
            "Some people believe that climate change is the most urgent issue facing humanity "
            "today, while others argue that economic development should be prioritized. Discuss "
            "both views and give your opinion."
        ),
        "difficulty": "advanced",
        "time_limit": 40,
    },
    {
        "category": "Education",
        "title": "Online vs Traditional Learning",
        "content": (
            "Online learning has become increasingly popular. Compare the advantages and "
            "disadvantages of online learning with traditional classroom education. Which do you "
            "think is more effective and why?"
        ),
        "difficulty": "beginner",
        "time_limit": 40,
    },
    {
        "category": "Work & Career",
        "title": "Work-Life Balance",
        "content": (
            "In many countries, people are working longer hours and have less time for personal "
            "activities. What are the causes of this problem? What solutions can you suggest?"
        ),
        "difficulty": "intermediate",
        "time_limit": 40,
    },
    {
        "category": "Health & Lifestyle",
        "title": "Public Health Measures",
        "content": (
            "Some people believe that governments should impose strict regulations on unhealthy "
            "foods to improve public health, while others think individuals should have the "
            "freedom to choose what they eat. Discuss both views and give your opinion."
        ),
        "difficulty": "advanced",
        "time_limit": 40,
    },
]

WRITING_TIPS: List[str] = [
    "Write at least 250 words for Task 2",
    "Include clear introduction and conclusion",
    "Use topic sentences for each paragraph",
    "Support ideas with examples",
    "Check grammar and spelling",
]
