SKILL_COUNT = 5
PROJECT_COUNT = 2
TECHNICAL_QUESTION_COUNT = 3
BEHAVIORAL_QUESTION_COUNT = 3


def generate_resume_analysis_prompt(resume_text: str) -> str:
    """
    Generate the prompt for structured resume analysis.

    Args:
        resume_text: The normalized text content of the resume.

    Returns:
        The formatted prompt string.
    """
    return (
        "You are an expert resume analyzer. Analyze this resume and provide a structured assessment in valid JSON format.\n\n"
        "IMPORTANT: Your response must be ONLY valid JSON, with no additional text or formatting.\n\n"
        "Required JSON structure:\n"
        "{\n"
        '  "technical_skills": ["skill1", "skill2"],\n'
        '  "years_experience": number,\n'
        '  "key_projects": [{"name": "Project Name", "description": "Brief project description"}],\n'
        '  "technical_questions": [{"question": "Technical question based on their skills", "context": "Why this question is relevant"}],\n'
        '  "behavioral_questions": [{"question": "Behavioral question based on experience", "context": "Why this question is relevant"}]\n'
        "}\n\n"
        "Analysis requirements:\n"
        f"1. Extract exactly {SKILL_COUNT} most relevant technical skills\n"
        "2. Calculate total years of experience as an integer (use 0 if unclear)\n"
        f"3. List {PROJECT_COUNT} most significant projects\n"
        f"4. Generate {TECHNICAL_QUESTION_COUNT} technical questions based on their strongest skills\n"
        f"5. Generate {BEHAVIORAL_QUESTION_COUNT} behavioral questions based on their experience\n\n"
        f"Resume to analyze:\n{resume_text}"
    )


def generate_guidance_prompt(question: str, context: str) -> str:
    """
    Generate the prompt asking for guidance on answering one interview question.

    Args:
        question: The interview question text.
        context: Why the question was asked, plus the candidate's answer when there is one.

    Returns:
        The formatted prompt string.
    """
    return (
        "As an expert interviewer, provide detailed guidance for answering this interview question.\n\n"
        f"Question: {question}\n"
        f"Context: {context}\n\n"
        "Provide a structured response covering:\n"
        "1. Key points to emphasize\n"
        "2. Suggested answer structure (using STAR method if applicable)\n"
        "3. Important technical terms or concepts to mention\n"
        "4. Common pitfalls to avoid\n"
        "5. Example phrases or transitions to use\n\n"
        "Format the response in clear sections with markdown headings."
    )
