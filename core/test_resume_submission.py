"""
Tests for résumé form intake
"""

from django.http import QueryDict
from django.test import TestCase

from core.dto import ResumeSubmission


class ResumeSubmissionTestCase(TestCase):
    """Test cases for ResumeSubmission"""

    def test_from_post_maps_form_names(self):
        data = QueryDict(mutable=True)
        data.update({
            'name': '山田 花子',
            'desiredPosition': 'パート',
            'prText': '笑顔',
            'experience': '一行目\n二行目',
        })

        submission = ResumeSubmission.from_post(data)

        self.assertEqual(submission.name, '山田 花子')
        self.assertEqual(submission.desired_position, 'パート')
        self.assertEqual(submission.pr_text, '笑顔')
        self.assertEqual(submission.experience, '一行目\n二行目')

    def test_missing_fields_become_empty_strings(self):
        submission = ResumeSubmission.from_post({})

        self.assertEqual(submission, ResumeSubmission())
        self.assertEqual(submission.birth, '')

    def test_unknown_fields_are_ignored(self):
        submission = ResumeSubmission.from_post({'csrfmiddlewaretoken': 'x', 'name': 'A'})
        self.assertEqual(submission.name, 'A')

    def test_to_report_context(self):
        submission = ResumeSubmission(name='A', birth='1998-04-12', pr_text='PR')
        context = submission.to_report_context()

        self.assertEqual(context['name'], 'A')
        self.assertEqual(context['birth'], '1998-04-12')
        self.assertEqual(context['pr_text'], 'PR')
        self.assertEqual(context['desired_position'], '')
        self.assertNotIn('FORM_FIELDS', context)
