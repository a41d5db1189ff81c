import logging

import requests
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import ProfileResolutionError
from .profiles import ProfileResolver
from .serializers import ResolvedProfileSerializer
from .sessions import get_session

logger = logging.getLogger(__name__)


class ProfileView(APIView):
    renderer_classes = (JSONRenderer,)
    resolver_class = ProfileResolver

    def get(self, *args, **kw):
        """
        Returns the resolved profile of the logged in user, or the guest state
        """
        session = get_session(self.request)

        if not session.is_logged_in:
            return Response({"authenticated": False})

        resolver = self.resolver_class(http=session.http)
        try:
            profile = resolver.resolve(session.web_id)
        except (ProfileResolutionError, requests.RequestException):
            logger.exception(f"failed to resolve profile of {session.web_id}")
            return Response({"authenticated": False})
        finally:
            session.close()

        serializer = ResolvedProfileSerializer(profile)
        return Response({"authenticated": True, "profile": serializer.data})
