"""
Shared request helpers for views addressed by company_id.
"""
from rest_framework import status
from rest_framework.response import Response

from .models import Company


def invalid_request(serializer):
    """400 response for a request schema that failed validation."""
    return Response({'error': serializer.errors}, status=status.HTTP_400_BAD_REQUEST)


def get_company_or_404(company_id):
    """
    Look up a company by id.

    Returns (company, None) when found, otherwise (None, 404 Response).
    """
    company = Company.objects.filter(id=company_id).first()
    if company is None:
        return None, Response({'error': 'company not found'}, status=status.HTTP_404_NOT_FOUND)
    return company, None
