from django import forms

from .models import JobPost

EDITABLE_FIELDS = [
    'title', 'description', 'required_skills', 'location_city', 'job_type',
    'salary_min', 'salary_max', 'remote_option', 'job_category',
]


class JobPostForm(forms.ModelForm):
    class Meta:
        model = JobPost
        fields = EDITABLE_FIELDS + ['location_country', 'expires_at']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['title'].error_messages = {
            'required': 'Job title is required and cannot be empty.',
            'max_length': 'Job title must be less than 200 characters.',
        }
        self.fields['description'].error_messages = {
            'required': 'Job description is required. Please provide a description of the position.',
        }
        self.fields['job_type'].error_messages = {
            'invalid_choice': 'Please select a valid job type.',
        }
        self.fields['job_category'].error_messages = {
            'invalid_choice': 'Please select a valid job category from the list.',
        }

    def clean_title(self):
        title = (self.cleaned_data.get('title') or '').strip()
        if not title:
            raise forms.ValidationError('Job title is required and cannot be empty.')
        return title

    def clean_description(self):
        description = (self.cleaned_data.get('description') or '').strip()
        if not description:
            raise forms.ValidationError('Job description is required. Please provide a description of the position.')
        return description

    def clean_job_category(self):
        category = (self.cleaned_data.get('job_category') or '').strip()
        return category or None

    def clean_job_type(self):
        return self.cleaned_data.get('job_type') or None

    def clean_salary_min(self):
        salary_min = self.cleaned_data.get('salary_min')
        if salary_min is not None and salary_min < 0:
            raise forms.ValidationError('Minimum salary cannot be negative.')
        return salary_min

    def clean_salary_max(self):
        salary_max = self.cleaned_data.get('salary_max')
        if salary_max is not None and salary_max < 0:
            raise forms.ValidationError('Maximum salary cannot be negative.')
        return salary_max

    def clean(self):
        cleaned_data = super().clean()
        salary_min = cleaned_data.get('salary_min')
        salary_max = cleaned_data.get('salary_max')
        if salary_min is not None and salary_max is not None and salary_min > salary_max:
            raise forms.ValidationError({
                'salary_max': 'Maximum salary must be greater than or equal to minimum salary.'
            })
        return cleaned_data
