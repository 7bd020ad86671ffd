from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.views import defaults as default_views

from core.images import image_proxy

# The Django admin lives under /backend/ so that /admin/ stays free for the
# school admin pages.

urlpatterns = [
    path("backend/", admin.site.urls),
    path("_image/", image_proxy, name="image_proxy"),

    # JSON routes
    path("api/auth/", include("accounts.api_urls")),
    path("api/account/", include("accounting.urls")),
    path("api/sms/", include("sms.api_urls")),
    path("api/", include("result.api_urls")),

    # Pages
    path("", include("core.urls")),
    path("", include("accounts.urls")),
    path("admin/", include("sms.urls")),
    path("list/", include("course.urls")),
]

if settings.DEBUG:
    urlpatterns += [
        path("400/", default_views.bad_request, kwargs={"exception": Exception("Bad Request!")}),
        path("403/", default_views.permission_denied, kwargs={"exception": Exception("Permission Denied")}),
        path("404/", default_views.page_not_found, kwargs={"exception": Exception("Page not Found")}),
        path("500/", default_views.server_error),
    ]
