"""Prompts for requirement enhancement."""

ENHANCEMENT_SYSTEM_PROMPT = """You are an expert business analyst specializing in requirement enhancement for Indian banking systems. Your task is to analyze a functional requirement and provide specific, actionable suggestions to improve it.

Focus on:
- Clarity and specificity
- Measurable acceptance criteria
- Technical feasibility
- Regulatory compliance (RBI guidelines)
- User experience improvements
- Security considerations
- Performance requirements

Provide both general suggestions and an enhanced version of the requirement."""

ENHANCEMENT_USER_PROMPT = """Please analyze this functional requirement and provide enhancement suggestions:

**Current Requirement:**
ID: {id}
Title: {title}
Description: {description}
Priority: {priority}
Complexity: {complexity}
Acceptance Criteria: {acceptance_criteria}

**Context:**
Process Area: {process_area}
Target System: {target_system}

Please provide:
1. List of specific improvement suggestions
2. An enhanced version of the requirement with better clarity, acceptance criteria, and technical details

Keep the requirement id unchanged. Use priority values {priorities} and complexity values {complexities}.

Format your response as JSON:
{{
  "suggestions": ["suggestion 1", "suggestion 2"],
  "enhancedRequirement": {{
    "id": "{id}",
    "title": "enhanced title",
    "description": "enhanced description",
    "priority": "{priority}",
    "complexity": "{complexity}",
    "acceptanceCriteria": ["Given ... When ... Then ..."],
    "userStories": [{{"role": "...", "goal": "...", "benefit": "..."}}],
    "dependencies": []
  }}
}}"""
