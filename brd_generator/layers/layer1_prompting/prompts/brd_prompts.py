"""Prompts for BRD generation."""

BRD_SYSTEM_PROMPT = """You are an expert business analyst specializing in Indian banking and financial services implementations. Your task is to analyze call transcripts from business requirements gathering workshops and generate a Business Requirements Document (BRD).

REQUIRED OUTPUT STRUCTURE - ALL sections are MANDATORY:
{section_outline}

Indian Banking Context - MUST address:
- RBI (Reserve Bank of India) regulations and compliance requirements
- Digital India initiatives and government programs
- UPI/IMPS/NEFT payment integrations
- KYC/AML/CKYC requirements and procedures
- Core Banking System (CBS) integration
- Digital banking channels (Mobile, Internet Banking)
- Security standards (2FA, encryption, audit trails)
- Data localization and privacy (IT Act, RBI guidelines)

Ensure all requirements are:
- Specific and measurable
- Technically feasible
- Compliant with Indian banking regulations
- Aligned with digital transformation goals

Allowed values (use EXACTLY these spellings):
- priority: {priorities}
- complexity: {complexities}
- non-functional category: {nfr_categories}
- risk category: {risk_categories}
- risk probability / impact: {risk_levels}

Every id must be unique within its list (FR-001, FR-002, ...).
Return ONLY valid JSON with the following top-level structure:
{{
{schema}
}}"""

BRD_USER_PROMPT = """Generate a BRD based on this transcript.

**Context:**
- Client: {client_name}
- Team: {team_name}
- Process Area: {process_area}
- Target System: {target_system}
- Template: {template}
- Analysis Depth: {analysis_depth}

**Transcript:**
{transcript}

{task}

Return ONLY valid JSON. No explanations, no markdown."""

FULL_DOCUMENT_TASK = "Populate every section of the BRD. Each list must contain at least the minimum number of items stated in the instructions."

SECTION_TASK = """Generate ONLY the "{section_title}" part of the BRD.
The JSON object must contain exactly these top-level keys: {keys}."""

# 최상위 필드별 출력 형식 예시 (섹션 프롬프트에서 필요한 것만 골라 조립)
FIELD_SCHEMAS = {
    "tableOfContents": """  "tableOfContents": [
    {{"section": "Executive Summary", "pageNumber": 1}}
  ]""",
    "executiveSummary": """  "executiveSummary": "Business context, objectives, scope, stakeholders, expected benefits, timeline\"""",
    "functionalRequirements": """  "functionalRequirements": [
    {{
      "id": "FR-001",
      "title": "Short title",
      "description": "What, why and how",
      "priority": "{priority_example}",
      "complexity": "{complexity_example}",
      "acceptanceCriteria": ["Given ... When ... Then ..."],
      "userStories": [{{"role": "Branch officer", "goal": "...", "benefit": "..."}}],
      "dependencies": ["FR-002"]
    }}
  ]""",
    "nonFunctionalRequirements": """  "nonFunctionalRequirements": [
    {{
      "id": "NFR-001",
      "title": "Short title",
      "description": "Measurable requirement",
      "category": "{nfr_example}",
      "scalabilityMetrics": {{"concurrentUsers": "...", "transactionVolume": "..."}},
      "availabilityRequirements": {{"uptime": "...", "disasterRecovery": "..."}},
      "securityStandards": {{"encryption": "...", "auditTrails": "...", "accessControls": "..."}},
      "usabilityStandards": {{"responseTime": "...", "userExperience": "..."}},
      "complianceDetails": {{"regulations": ["RBI Master Direction"], "requirements": "..."}}
    }}
  ]""",
    "integrationRequirements": """  "integrationRequirements": [
    {{
      "id": "IR-001",
      "title": "Short title",
      "description": "Integration purpose",
      "apiSpecifications": {{"endpoints": "...", "dataFormats": "JSON/ISO 20022", "authentication": "OAuth 2.0 / mTLS"}},
      "dataFlow": ["Step 1", "Step 2"]
    }}
  ]""",
    "businessProcessFlows": """  "businessProcessFlows": [
    {{
      "id": "BPF-001",
      "processName": "Process name",
      "currentState": "How it works today",
      "futureState": "How it will work",
      "steps": [{{"stepNumber": 1, "description": "...", "actor": "...", "decision": "optional decision point"}}]
    }}
  ]""",
    "userInterfaceRequirements": """  "userInterfaceRequirements": [
    {{
      "id": "UI-001",
      "screenName": "Screen name",
      "description": "Screen purpose",
      "components": ["Search bar", "Results grid"],
      "navigationFlow": "...",
      "accessibility": "WCAG 2.1 AA",
      "responsiveness": "..."
    }}
  ]""",
    "raciMatrix": """  "raciMatrix": [
    {{"task": "Task name", "responsible": "Role", "accountable": "Role", "consulted": "Role", "informed": "Role"}}
  ]""",
    "assumptions": """  "assumptions": ["Specific assumption"]""",
    "constraints": """  "constraints": ["Specific constraint"]""",
    "riskManagement": """  "riskManagement": [
    {{
      "id": "RISK-001",
      "category": "{risk_category_example}",
      "description": "Risk description",
      "probability": "{risk_level_example}",
      "impact": "{risk_level_example}",
      "mitigation": "Mitigation strategy",
      "owner": "Owner role"
    }}
  ]""",
    "changelog": """  "changelog": [
    {{"version": "1.0", "date": "{today}", "author": "BRD Generator", "changes": "Initial BRD creation"}}
  ]""",
}

# 최상위 필드별 개요 문구. {count}는 분석 깊이에 따른 최소 개수로 치환됩니다.
FIELD_OUTLINES = {
    "tableOfContents": "TABLE OF CONTENTS ({count} entries): list ALL sections with page numbers",
    "executiveSummary": "EXECUTIVE SUMMARY: business context, objectives, scope, stakeholders, expected benefits, timeline",
    "functionalRequirements": "FUNCTIONAL REQUIREMENTS ({count} requirements): id, title, detailed description, priority, complexity, specific Given-When-Then acceptance criteria, 2-3 user stories, dependencies",
    "nonFunctionalRequirements": "NON-FUNCTIONAL REQUIREMENTS ({count} requirements): Performance, Security, Scalability, Availability, Usability, Compliance with detailed metrics",
    "integrationRequirements": "INTEGRATION REQUIREMENTS ({count} integrations): APIs, data flows, authentication details",
    "businessProcessFlows": "BUSINESS PROCESS FLOWS ({count} processes): current vs future state, detailed steps with actors and decision points",
    "userInterfaceRequirements": "USER INTERFACE REQUIREMENTS ({count} screens): screen specs, components, navigation, accessibility",
    "raciMatrix": "RACI MATRIX ({count} tasks): responsibility assignments",
    "assumptions": "ASSUMPTIONS ({count} items): technical, business and operational assumptions",
    "constraints": "CONSTRAINTS ({count} items): budget, timeline, technical, regulatory constraints",
    "riskManagement": "RISK MANAGEMENT ({count} risks): category, probability, impact, mitigation, owner",
    "changelog": "CHANGELOG ({count} entry): version history",
}
