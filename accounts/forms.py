from django import forms

from jobs.models import JOB_TYPES

from .models import JobSeekerProfile, SECURITY_QUESTIONS, Role


class RegistrationForm(forms.Form):
    username = forms.CharField(max_length=150)
    email = forms.EmailField()
    password = forms.CharField(min_length=6)
    first_name = forms.CharField(max_length=150, required=False)
    last_name = forms.CharField(max_length=150, required=False)
    role = forms.ChoiceField(choices=Role.choices)
    company_name = forms.CharField(max_length=200, required=False)
    security_question = forms.ChoiceField(choices=list(SECURITY_QUESTIONS.items()), required=False)
    security_answer = forms.CharField(max_length=255, required=False)

    def clean_username(self):
        return self.cleaned_data['username'].strip()

    def clean_email(self):
        return self.cleaned_data['email'].strip().lower()

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('security_question') and not (cleaned_data.get('security_answer') or '').strip():
            raise forms.ValidationError({'security_answer': 'Please provide an answer to your security question.'})
        return cleaned_data


class JobSeekerProfileForm(forms.ModelForm):
    full_name = forms.CharField(max_length=300, required=False)
    phone_number = forms.CharField(max_length=20, required=False)
    job_type = forms.ChoiceField(choices=[('', '---')] + [(t, t) for t in JOB_TYPES], required=False)

    class Meta:
        model = JobSeekerProfile
        fields = [
            'city', 'preferred_location', 'current_title', 'profile_headline',
            'years_experience', 'skills', 'job_type', 'expected_salary', 'offering_services',
        ]

    def clean_expected_salary(self):
        salary = self.cleaned_data.get('expected_salary')
        if salary is not None and salary < 0:
            raise forms.ValidationError('Expected salary cannot be negative.')
        return salary


class WorkExperienceForm(forms.Form):
    job_title = forms.CharField(max_length=200)
    company_name = forms.CharField(max_length=200)
    description = forms.CharField(required=False)
    start_date = forms.DateField(required=False)
    end_date = forms.DateField(required=False)

    def clean(self):
        cleaned_data = super().clean()
        start_date = cleaned_data.get('start_date')
        end_date = cleaned_data.get('end_date')
        if start_date and end_date and start_date > end_date:
            raise forms.ValidationError({'end_date': 'End date cannot be before start date.'})
        return cleaned_data


class EducationForm(forms.Form):
    institution_name = forms.CharField(max_length=200)
    degree = forms.CharField(max_length=200)
    field_of_study = forms.CharField(max_length=200, required=False)
    start_year = forms.IntegerField(min_value=1900, max_value=2100, required=False)
    end_year = forms.IntegerField(min_value=1900, max_value=2100, required=False)

    def clean(self):
        cleaned_data = super().clean()
        start_year = cleaned_data.get('start_year')
        end_year = cleaned_data.get('end_year')
        if start_year and end_year and start_year > end_year:
            raise forms.ValidationError({'end_year': 'End year cannot be before start year.'})
        return cleaned_data


class CompanyProfileForm(forms.Form):
    company_name = forms.CharField(max_length=200)
    company_description = forms.CharField(required=False)
    company_location = forms.CharField(max_length=200, required=False)


class SecurityQuestionResetForm(forms.Form):
    username = forms.CharField(max_length=150)
    security_answer = forms.CharField(max_length=255)
    new_password = forms.CharField(min_length=6)
    confirm_password = forms.CharField()

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('new_password') != cleaned_data.get('confirm_password'):
            raise forms.ValidationError('Passwords do not match.')
        return cleaned_data


def first_form_error(form):
    """Return the first human-readable error message of a bound, invalid form."""
    for field, errors in form.errors.items():
        if errors:
            if field == '__all__':
                return errors[0]
            label = field.replace('_', ' ').capitalize()
            return f"{label}: {errors[0]}"
    return 'Invalid input.'
