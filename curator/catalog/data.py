"""Curated learning-resource catalog.

Grouped as category -> sub-topic -> entries. Entries are validated into
``CandidateResource`` models once, at import time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from curator.models import CandidateResource

_RAW_CATALOG: dict[str, dict[str, list[dict[str, Any]]]] = {
    "software_development": {
        "javascript": [
            {
                "type": "Course",
                "title": "JavaScript Algorithms and Data Structures",
                "description": "Learn JavaScript fundamentals and computer science concepts through interactive coding challenges.",
                "url": "https://www.freecodecamp.org/learn/javascript-algorithms-and-data-structures/",
                "provider": "freeCodeCamp",
                "price": "free",
                "rating": 4.8,
                "difficulty": "beginner",
                "duration": "300 hours",
            },
            {
                "type": "Course",
                "title": "The Complete JavaScript Course",
                "description": "Modern JavaScript from fundamentals to advanced topics including ES6+, async/await and DOM manipulation.",
                "url": "https://www.udemy.com/course/the-complete-javascript-course/",
                "provider": "Udemy",
                "price": "paid",
                "rating": 4.7,
                "difficulty": "beginner",
                "duration": "69 hours",
            },
            {
                "type": "Tutorial",
                "title": "JavaScript Tutorial for Beginners",
                "description": "Complete JavaScript tutorial covering the fundamentals with practical examples.",
                "url": "https://www.youtube.com/watch?v=PkZNo7MFNFg",
                "provider": "YouTube",
                "price": "free",
                "rating": 4.6,
                "difficulty": "beginner",
                "duration": "3 hours",
            },
            {
                "type": "Documentation",
                "title": "MDN JavaScript Guide",
                "description": "Comprehensive JavaScript documentation and tutorials from Mozilla.",
                "url": "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Guide",
                "provider": "MDN",
                "price": "free",
                "rating": 4.9,
                "difficulty": "intermediate",
                "duration": "Self-paced",
            },
        ],
        "nodejs": [
            {
                "type": "Course",
                "title": "Back End Development and APIs",
                "description": "Build Node.js and Express APIs, work with npm packages and persist data with MongoDB.",
                "url": "https://www.freecodecamp.org/learn/back-end-development-and-apis/",
                "provider": "freeCodeCamp",
                "price": "free",
                "rating": 4.7,
                "difficulty": "intermediate",
                "duration": "300 hours",
            },
            {
                "type": "Course",
                "title": "NodeJS Course",
                "description": "Server-side JavaScript with Node and Express as part of the full-stack JavaScript path.",
                "url": "https://www.theodinproject.com/paths/full-stack-javascript/courses/nodejs",
                "provider": "The Odin Project",
                "price": "free",
                "rating": 4.8,
                "difficulty": "intermediate",
                "duration": "Self-paced",
            },
            {
                "type": "Documentation",
                "title": "Learn Node.js",
                "description": "Official Node.js learning material covering the event loop, modules and asynchronous I/O.",
                "url": "https://nodejs.org/en/learn",
                "provider": "OpenJS Foundation",
                "price": "free",
                "rating": 4.7,
                "difficulty": "intermediate",
                "duration": "Self-paced",
            },
        ],
        "react": [
            {
                "type": "Course",
                "title": "React - The Complete Guide",
                "description": "Deep dive into React with hooks, context, Redux and Next.js.",
                "url": "https://www.udemy.com/course/react-the-complete-guide-incl-redux/",
                "provider": "Udemy",
                "price": "paid",
                "rating": 4.6,
                "difficulty": "intermediate",
                "duration": "48 hours",
            },
            {
                "type": "Tutorial",
                "title": "React Tutorial for Beginners",
                "description": "React fundamentals including components, props, state and hooks.",
                "url": "https://www.youtube.com/watch?v=SqcY0GlETPk",
                "provider": "YouTube",
                "price": "free",
                "rating": 4.7,
                "difficulty": "beginner",
                "duration": "2 hours",
            },
            {
                "type": "Course",
                "title": "Front End Development Libraries",
                "description": "Learn React, Redux and other front-end libraries through hands-on projects.",
                "url": "https://www.freecodecamp.org/learn/front-end-development-libraries/",
                "provider": "freeCodeCamp",
                "price": "free",
                "rating": 4.8,
                "difficulty": "intermediate",
                "duration": "300 hours",
            },
            {
                "type": "Documentation",
                "title": "React Official Documentation",
                "description": "Official React documentation with tutorials and API reference.",
                "url": "https://react.dev/learn",
                "provider": "React Team",
                "price": "free",
                "rating": 4.9,
                "difficulty": "intermediate",
                "duration": "Self-paced",
            },
        ],
        "python": [
            {
                "type": "Course",
                "title": "Scientific Computing with Python",
                "description": "Python programming fundamentals and scientific computing libraries.",
                "url": "https://www.freecodecamp.org/learn/scientific-computing-with-python/",
                "provider": "freeCodeCamp",
                "price": "free",
                "rating": 4.8,
                "difficulty": "beginner",
                "duration": "300 hours",
            },
            {
                "type": "Course",
                "title": "Complete Python Bootcamp",
                "description": "Python from scratch with hands-on projects and real-world applications.",
                "url": "https://www.udemy.com/course/complete-python-bootcamp/",
                "provider": "Udemy",
                "price": "paid",
                "rating": 4.6,
                "difficulty": "beginner",
                "duration": "22 hours",
            },
            {
                "type": "Tutorial",
                "title": "Python Tutorial for Beginners",
                "description": "Python programming tutorial covering all the fundamentals.",
                "url": "https://www.youtube.com/watch?v=_uQrJ0TkZlc",
                "provider": "YouTube",
                "price": "free",
                "rating": 4.7,
                "difficulty": "beginner",
                "duration": "6 hours",
            },
            {
                "type": "Practice",
                "title": "Python Exercises on HackerRank",
                "description": "Practice Python with coding challenges and exercises.",
                "url": "https://www.hackerrank.com/domains/python",
                "provider": "HackerRank",
                "price": "free",
                "rating": 4.5,
                "difficulty": "intermediate",
                "duration": "Self-paced",
            },
        ],
    },
    "data_science": {
        "python_data": [
            {
                "type": "Course",
                "title": "Data Analysis with Python",
                "description": "Data analysis using Python, pandas, NumPy and matplotlib.",
                "url": "https://www.freecodecamp.org/learn/data-analysis-with-python/",
                "provider": "freeCodeCamp",
                "price": "free",
                "rating": 4.8,
                "difficulty": "intermediate",
                "duration": "300 hours",
            },
            {
                "type": "Course",
                "title": "Python for Data Science and Machine Learning",
                "description": "Data science bootcamp with pandas, NumPy, matplotlib and scikit-learn.",
                "url": "https://www.udemy.com/course/python-for-data-science-and-machine-learning-bootcamp/",
                "provider": "Udemy",
                "price": "paid",
                "rating": 4.6,
                "difficulty": "intermediate",
                "duration": "25 hours",
            },
            {
                "type": "Course",
                "title": "Introduction to Data Science in Python",
                "description": "Data manipulation, analysis and visualization with Python.",
                "url": "https://www.coursera.org/learn/python-data-analysis",
                "provider": "Coursera",
                "price": "freemium",
                "rating": 4.5,
                "difficulty": "intermediate",
                "duration": "4 weeks",
            },
        ],
        "machine_learning": [
            {
                "type": "Course",
                "title": "Machine Learning with Python",
                "description": "Machine learning algorithms and their implementation with Python and scikit-learn.",
                "url": "https://www.freecodecamp.org/learn/machine-learning-with-python/",
                "provider": "freeCodeCamp",
                "price": "free",
                "rating": 4.7,
                "difficulty": "advanced",
                "duration": "300 hours",
            },
            {
                "type": "Course",
                "title": "Machine Learning A-Z",
                "description": "Supervised and unsupervised learning from the ground up.",
                "url": "https://www.udemy.com/course/machinelearning/",
                "provider": "Udemy",
                "price": "paid",
                "rating": 4.5,
                "difficulty": "intermediate",
                "duration": "44 hours",
            },
            {
                "type": "Course",
                "title": "Machine Learning Specialization",
                "description": "Andrew Ng's foundational machine learning program.",
                "url": "https://www.coursera.org/specializations/machine-learning-introduction",
                "provider": "Coursera",
                "price": "freemium",
                "rating": 4.9,
                "difficulty": "intermediate",
                "duration": "11 weeks",
            },
            {
                "type": "Practice",
                "title": "Kaggle Intro to Machine Learning",
                "description": "Short hands-on lessons building and validating models on real datasets.",
                "url": "https://www.kaggle.com/learn/intro-to-machine-learning",
                "provider": "Kaggle",
                "price": "free",
                "rating": 4.6,
                "difficulty": "beginner",
                "duration": "3 hours",
            },
        ],
        "sql": [
            {
                "type": "Course",
                "title": "Relational Database Course",
                "description": "SQL and relational database concepts through hands-on projects.",
                "url": "https://www.freecodecamp.org/learn/relational-database/",
                "provider": "freeCodeCamp",
                "price": "free",
                "rating": 4.8,
                "difficulty": "beginner",
                "duration": "300 hours",
            },
            {
                "type": "Course",
                "title": "The Complete SQL Bootcamp",
                "description": "SQL from beginner to advanced with PostgreSQL.",
                "url": "https://www.udemy.com/course/the-complete-sql-bootcamp/",
                "provider": "Udemy",
                "price": "paid",
                "rating": 4.6,
                "difficulty": "beginner",
                "duration": "9 hours",
            },
            {
                "type": "Practice",
                "title": "SQL Exercises on W3Schools",
                "description": "Interactive SQL exercises and examples.",
                "url": "https://www.w3schools.com/sql/sql_exercises.asp",
                "provider": "W3Schools",
                "price": "free",
                "rating": 4.3,
                "difficulty": "beginner",
                "duration": "Self-paced",
            },
        ],
    },
    "design": {
        "ui_ux": [
            {
                "type": "Certification",
                "title": "Google UX Design Professional Certificate",
                "description": "Industry-recognized UX design certificate covering the complete design process.",
                "url": "https://www.coursera.org/professional-certificates/google-ux-design",
                "provider": "Coursera",
                "price": "paid",
                "rating": 4.8,
                "difficulty": "beginner",
                "duration": "6 months",
            },
            {
                "type": "Course",
                "title": "UI/UX Design Specialization",
                "description": "The UX design process from user research to prototyping.",
                "url": "https://www.coursera.org/specializations/ui-ux-design",
                "provider": "Coursera",
                "price": "freemium",
                "rating": 4.6,
                "difficulty": "intermediate",
                "duration": "4 months",
            },
            {
                "type": "Tutorial",
                "title": "Figma UI Design Tutorial",
                "description": "Figma from design basics to advanced features.",
                "url": "https://www.youtube.com/watch?v=FTFaQWZBqQ8",
                "provider": "YouTube",
                "price": "free",
                "rating": 4.7,
                "difficulty": "beginner",
                "duration": "4 hours",
            },
        ],
        "figma": [
            {
                "type": "Course",
                "title": "Figma Masterclass",
                "description": "Figma from basics to prototyping and design systems.",
                "url": "https://www.udemy.com/course/figma-ux-ui-design-user-experience-tutorial-course/",
                "provider": "Udemy",
                "price": "paid",
                "rating": 4.5,
                "difficulty": "beginner",
                "duration": "12 hours",
            },
            {
                "type": "Tutorial",
                "title": "Figma Tutorial for Beginners",
                "description": "Figma basics including components, auto-layout and prototyping.",
                "url": "https://www.youtube.com/watch?v=3q3FV65ZrUs",
                "provider": "YouTube",
                "price": "free",
                "rating": 4.6,
                "difficulty": "beginner",
                "duration": "2 hours",
            },
        ],
    },
    "marketing": {
        "digital_marketing": [
            {
                "type": "Certification",
                "title": "Google Digital Marketing & E-commerce Certificate",
                "description": "Digital marketing certificate covering SEO, SEM, social media and analytics.",
                "url": "https://www.coursera.org/professional-certificates/google-digital-marketing-ecommerce",
                "provider": "Coursera",
                "price": "paid",
                "rating": 4.7,
                "difficulty": "beginner",
                "duration": "6 months",
            },
            {
                "type": "Course",
                "title": "Digital Marketing Specialization",
                "description": "Digital marketing strategy, social media, SEO and analytics.",
                "url": "https://www.coursera.org/specializations/digital-marketing",
                "provider": "Coursera",
                "price": "freemium",
                "rating": 4.5,
                "difficulty": "intermediate",
                "duration": "8 months",
            },
            {
                "type": "Course",
                "title": "HubSpot Content Marketing Course",
                "description": "Free course on content marketing strategy and execution.",
                "url": "https://academy.hubspot.com/courses/content-marketing",
                "provider": "HubSpot",
                "price": "free",
                "rating": 4.6,
                "difficulty": "beginner",
                "duration": "4 hours",
            },
        ],
    },
}


def _build(raw: dict[str, dict[str, list[dict[str, Any]]]]) -> Mapping[str, Mapping[str, tuple[CandidateResource, ...]]]:
    return MappingProxyType({
        category: MappingProxyType({
            topic: tuple(CandidateResource.model_validate(entry) for entry in entries)
            for topic, entries in topics.items()
        })
        for category, topics in raw.items()
    })


CATALOG = _build(_RAW_CATALOG)
