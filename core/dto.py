"""
Data Transfer Objects for form intake
"""

from dataclasses import dataclass, asdict


@dataclass
class ResumeSubmission:
    """
    Résumé fields submitted from the intake form.

    Lives for a single request; nothing is validated beyond the presence
    checks the report template performs.
    """

    name: str = ''
    furigana: str = ''
    email: str = ''
    phone: str = ''
    address: str = ''
    birth: str = ''
    desired_position: str = ''
    experience: str = ''
    pr_text: str = ''

    # Form field name -> attribute name
    FORM_FIELDS = {
        'name': 'name',
        'furigana': 'furigana',
        'email': 'email',
        'phone': 'phone',
        'address': 'address',
        'birth': 'birth',
        'desiredPosition': 'desired_position',
        'experience': 'experience',
        'prText': 'pr_text',
    }

    @classmethod
    def from_post(cls, data) -> 'ResumeSubmission':
        """Build a submission from a QueryDict or plain mapping"""
        return cls(**{
            attr: data.get(field) or ''
            for field, attr in cls.FORM_FIELDS.items()
        })

    def to_report_context(self) -> dict:
        """Context for the 'resume.v1' report template"""
        return asdict(self)
