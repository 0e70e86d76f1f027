from rest_framework.permissions import BasePermission


class IsClinicMember(BasePermission):
    """
    Admin, ou usuário 'clinic' vinculado a uma clínica (clinic_id no token).
    Usuário 'clinic' sem vínculo não acessa rotas de clínica.
    """

    def has_permission(self, request, view):
        user = request.user
        role = getattr(user, "role", None)
        if role == "admin":
            return True
        return bool(role == "clinic" and getattr(user, "clinic_id", None))
