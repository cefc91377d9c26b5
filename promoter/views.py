from django.http import JsonResponse


def health_check(request):
    """Liveness probe for load balancers and uptime monitors; always 200."""
    return JsonResponse({"status": "healthy"})
