"""
Services Layer

Pure scheduling services that:
- Accept already-parsed domain inputs (ScheduleRequest, GeneratedSchedule)
- Return fresh value objects or response models
- Do NOT depend on HTTP request/response objects
- Do NOT store anything
"""
