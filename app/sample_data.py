# Example résumé shown when a student has no stored profile yet.
SAMPLE_RESUME = {
    "personalInfo": {
        "name": "Alex Johnson",
        "email": "alex.j@example.com",
        "phone": "555-500-1234",
        "linkedin": "https://linkedin.com/in/alexj",
        "github": "https://github.com/alexj-dev",
        "portfolio": "https://alexj.dev",
    },
    "education": [
        {
            "college": "State University",
            "degree": "M.S. Data Science",
            "cgpa": "3.9",
            "year": "2025",
            "coursework": "Machine Learning, Cloud Computing, Distributed Systems",
        }
    ],
    "skills": ["Python", "TensorFlow", "React", "AWS", "Data Pipelines"],
    "experience": [
        {
            "company": "Tech Innovators",
            "role": "Data Science Intern",
            "duration": "May 2024 - Aug 2024",
            "description": [
                "Developed automated ETL jobs that reduced data preparation time by 30%.",
                "Experimented with transformer models to uplift recommendation CTR by 12%.",
            ],
        }
    ],
    "projects": [
        {
            "title": "AI Resume Grader",
            "technologies": "React, Node, OpenAI API",
            "description": "Built a full-stack tool that analyses resumes and suggests targeted improvements.",
            "githubLink": "https://github.com/alexj-dev/ai-resume-grader",
        }
    ],
    "achievements": "Dean's List (2023, 2024)",
    "extracurriculars": "Volunteer mentor at local coding bootcamp; organiser of Data Science Club hackathons.",
    "targetRole": "Machine Learning Engineer",
}
